from django.contrib import admin
from .models import Purchase, PurchaseLine, ShoppingListEntry


class PurchaseLineInline(admin.TabularInline):
    model = PurchaseLine
    extra = 0
    raw_id_fields = ['item']


@admin.register(Purchase)
class PurchaseAdmin(admin.ModelAdmin):
    list_display = ['vendor', 'household', 'purchase_date', 'total_amount', 'paid_by']
    search_fields = ['vendor', 'notes']
    raw_id_fields = ['household', 'paid_by', 'created_by']
    date_hierarchy = 'purchase_date'
    inlines = [PurchaseLineInline]


@admin.register(ShoppingListEntry)
class ShoppingListEntryAdmin(admin.ModelAdmin):
    list_display = ['item_name', 'household', 'added_by', 'created_at', 'purchased_at']
    search_fields = ['item_name']
    raw_id_fields = ['household', 'added_by', 'purchase', 'purchase_line']
