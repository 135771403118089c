from django.contrib import admin
from .models import Item, InventoryRecord, WasteEvent


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    list_display = ['name', 'household', 'default_unit', 'default_category', 'perishable']
    list_filter = ['perishable']
    search_fields = ['name']
    raw_id_fields = ['household', 'default_category', 'created_by']


@admin.register(InventoryRecord)
class InventoryRecordAdmin(admin.ModelAdmin):
    list_display = ['item', 'household', 'quantity', 'unit', 'storage', 'expiry_date', 'cost_total']
    list_filter = ['storage']
    search_fields = ['item__name']
    raw_id_fields = ['household', 'item', 'created_by', 'updated_by']
    date_hierarchy = 'expiry_date'


@admin.register(WasteEvent)
class WasteEventAdmin(admin.ModelAdmin):
    list_display = ['item', 'quantity', 'unit', 'reason', 'event_date', 'recorded_by']
    list_filter = ['reason']
    raw_id_fields = ['household', 'inventory_record', 'item', 'recorded_by']
    date_hierarchy = 'event_date'
