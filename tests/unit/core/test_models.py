"""Unit tests for BaseModel.

Uses a concrete test model created via Django's SchemaEditor so we can
exercise the abstract class against a real database.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from freezegun import freeze_time

from django.db import connection, models

from modules.core.models import BaseModel

pytestmark = pytest.mark.unit

CREATED = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)
EDITED = datetime(2025, 6, 16, 9, 30, tzinfo=timezone.utc)


class ConcreteBaseModel(BaseModel):
    name = models.CharField(max_length=100)

    class Meta(BaseModel.Meta):
        app_label = "core"
        db_table = "test_concrete_base"


@pytest.fixture(scope="session")
def _test_tables(django_db_setup, django_db_blocker):
    """Create the DB table for the concrete test model (idempotent for --reuse-db)."""
    with django_db_blocker.unblock():
        with connection.schema_editor() as editor:
            if ConcreteBaseModel._meta.db_table not in connection.introspection.table_names():
                editor.create_model(ConcreteBaseModel)


@pytest.fixture(autouse=True)
def _use_test_tables(_test_tables):
    """Ensure the test table exists for every test in this module."""


def _create_then_edit(**save_kwargs) -> ConcreteBaseModel:
    with freeze_time(CREATED):
        obj = ConcreteBaseModel.objects.create(name="original")
    with freeze_time(EDITED):
        obj.name = "modified"
        obj.save(**save_kwargs)
    obj.refresh_from_db()
    return obj


class TestBaseModel:
    def test_id_is_integer(self):
        obj = ConcreteBaseModel.objects.create(name="test")
        assert isinstance(obj.id, int)

    def test_ids_are_increasing(self):
        a = ConcreteBaseModel.objects.create(name="first")
        b = ConcreteBaseModel.objects.create(name="second")
        assert a.id < b.id

    def test_timestamps_set_on_create(self):
        with freeze_time(CREATED):
            obj = ConcreteBaseModel.objects.create(name="test")
        assert obj.created_at == CREATED
        assert obj.updated_at == CREATED

    def test_updated_at_changes_on_save(self):
        obj = _create_then_edit()
        assert obj.updated_at == EDITED

    def test_created_at_does_not_change_on_save(self):
        obj = _create_then_edit()
        assert obj.created_at == CREATED

    def test_save_with_update_fields_includes_updated_at(self):
        """The save() guard must inject updated_at into update_fields."""
        obj = _create_then_edit(update_fields=["name"])
        assert obj.name == "modified"
        assert obj.updated_at == EDITED
