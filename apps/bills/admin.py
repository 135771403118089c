from django.contrib import admin
from .models import Bill, BillPayment, Expense, Budget


class BillPaymentInline(admin.TabularInline):
    model = BillPayment
    extra = 0
    raw_id_fields = ['paid_by']


@admin.register(Bill)
class BillAdmin(admin.ModelAdmin):
    list_display = ['name', 'household', 'amount', 'due_date', 'status']
    list_filter = ['status']
    search_fields = ['name', 'vendor']
    raw_id_fields = ['household', 'category', 'created_by']
    date_hierarchy = 'due_date'
    inlines = [BillPaymentInline]


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ['description', 'household', 'amount', 'date', 'source', 'category']
    list_filter = ['source']
    search_fields = ['description']
    raw_id_fields = ['household', 'category']
    date_hierarchy = 'date'


@admin.register(Budget)
class BudgetAdmin(admin.ModelAdmin):
    list_display = ['period', 'household', 'limit_amount']
    search_fields = ['period']
    raw_id_fields = ['household']
