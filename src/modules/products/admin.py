from django.contrib import admin

from modules.products.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "type", "available", "lead_time", "expiry_date", "season_end_date"]
    list_filter = ["type"]
    search_fields = ["name"]
