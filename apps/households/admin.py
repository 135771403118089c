from django.contrib import admin
from .models import Household, HouseholdMembership, Category


class HouseholdMembershipInline(admin.TabularInline):
    model = HouseholdMembership
    extra = 0
    raw_id_fields = ['user']


@admin.register(Household)
class HouseholdAdmin(admin.ModelAdmin):
    list_display = ['name', 'created_by', 'created_at']
    search_fields = ['name', 'created_by__email']
    raw_id_fields = ['created_by']
    inlines = [HouseholdMembershipInline]


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'type', 'household', 'created_at']
    list_filter = ['type']
    search_fields = ['name']
    raw_id_fields = ['household', 'created_by']
