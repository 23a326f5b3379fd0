from django.contrib import admin
from .models import Role, Permission, RolePermission


class RolePermissionInline(admin.TabularInline):
    model = RolePermission
    extra = 0


@admin.register(Role)
class RoleAdmin(admin.ModelAdmin):
    list_display = ['name', 'display_name', 'is_system', 'is_editable', 'is_active', 'created_at']
    list_filter = ['is_system', 'is_active']
    search_fields = ['name', 'display_name']
    ordering = ['name']
    inlines = [RolePermissionInline]


@admin.register(Permission)
class PermissionAdmin(admin.ModelAdmin):
    list_display = ['resource', 'action', 'description']
    list_filter = ['resource', 'action']
    search_fields = ['resource', 'description']


@admin.register(RolePermission)
class RolePermissionAdmin(admin.ModelAdmin):
    list_display = ['role', 'resource', 'action', 'created_at']
    list_filter = ['role', 'resource', 'action']
