from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.db.models import Count

from apps.households.models import HouseholdMembership
from .models import User


class MembershipInline(admin.TabularInline):
    model = HouseholdMembership
    extra = 0
    fields = ['household', 'role', 'joined_at']
    readonly_fields = ['joined_at']
    autocomplete_fields = ['household']


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Household member accounts, with their memberships inline."""

    list_display = ['email', 'display_name', 'household_count', 'is_active', 'last_login']
    list_filter = ['is_active', 'is_staff', 'created_at']
    search_fields = ['email', 'display_name']
    ordering = ['-created_at']

    # BaseUserAdmin expects a username field
    fieldsets = (
        (None, {'fields': ('email', 'display_name', 'password')}),
        ('Access', {'fields': ('is_active', 'is_staff', 'is_superuser')}),
        ('Activity', {'fields': ('created_at', 'last_login'), 'classes': ('collapse',)}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'display_name', 'password1', 'password2'),
        }),
    )
    readonly_fields = ['created_at', 'last_login']
    filter_horizontal = []
    inlines = [MembershipInline]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(
            _household_count=Count('household_memberships')
        )

    @admin.display(description='Households', ordering='_household_count')
    def household_count(self, obj):
        return obj._household_count
