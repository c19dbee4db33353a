"""
Celery application for the order fulfillment service.

DJANGO_SETTINGS_MODULE is set before the app is instantiated so Celery
reads its configuration from Django settings (``CELERY_`` prefix).
Notification delivery tasks live in ``modules.notifications.tasks``.
"""

import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

app = Celery("fulfillment")

app.config_from_object("django.conf:settings", namespace="CELERY")

# Discover tasks.py in every installed app
app.autodiscover_tasks()
