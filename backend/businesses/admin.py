from django.contrib import admin
from .models import (
    BusinessProfile, BusinessYouthRelationship, BusinessTracking, BusinessTrackingAttachment,
    BusinessResource, BusinessResourceCost
)


class BusinessYouthInline(admin.TabularInline):
    model = BusinessYouthRelationship
    extra = 0


@admin.register(BusinessProfile)
class BusinessProfileAdmin(admin.ModelAdmin):
    list_display = ['business_name', 'district', 'dare_model', 'sector', 'registration_status', 'created_at']
    list_filter = ['district', 'dare_model', 'sector', 'registration_status']
    search_fields = ['business_name', 'business_location']
    inlines = [BusinessYouthInline]


@admin.register(BusinessTracking)
class BusinessTrackingAdmin(admin.ModelAdmin):
    list_display = ['business', 'tracking_date', 'tracking_period', 'actual_revenue', 'actual_employees', 'is_verified']
    list_filter = ['tracking_period', 'is_verified', 'tracking_year']
    readonly_fields = ['verified_by', 'verification_date', 'created_at', 'updated_at']


@admin.register(BusinessTrackingAttachment)
class BusinessTrackingAttachmentAdmin(admin.ModelAdmin):
    list_display = ['tracking', 'attachment_name', 'attachment_type', 'uploaded_by', 'created_at']


class BusinessResourceCostInline(admin.TabularInline):
    model = BusinessResourceCost
    extra = 0


@admin.register(BusinessResource)
class BusinessResourceAdmin(admin.ModelAdmin):
    list_display = ['name', 'business', 'category', 'status', 'quantity', 'unit_cost', 'total_cost']
    list_filter = ['category', 'status']
    readonly_fields = ['total_cost']
    inlines = [BusinessResourceCostInline]
