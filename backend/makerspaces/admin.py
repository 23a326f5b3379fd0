from django.contrib import admin
from .models import Makerspace, BusinessMakerspaceAssignment


@admin.register(Makerspace)
class MakerspaceAdmin(admin.ModelAdmin):
    list_display = ['name', 'district', 'contact_person', 'status', 'created_at']
    list_filter = ['district', 'status']
    search_fields = ['name', 'address']


@admin.register(BusinessMakerspaceAssignment)
class BusinessMakerspaceAssignmentAdmin(admin.ModelAdmin):
    list_display = ['business', 'makerspace', 'assigned_date', 'is_active']
    list_filter = ['is_active', 'makerspace']
