from django.contrib import admin
from .models import Mentor, MentorBusinessRelationship, MentorshipMessage, BusinessAdvice


@admin.register(Mentor)
class MentorAdmin(admin.ModelAdmin):
    list_display = ['name', 'user', 'assigned_district', 'specialization', 'is_active']
    list_filter = ['assigned_district', 'is_active']
    search_fields = ['name', 'email', 'user__username']


@admin.register(MentorBusinessRelationship)
class MentorBusinessRelationshipAdmin(admin.ModelAdmin):
    list_display = ['mentor', 'business', 'assigned_date', 'meeting_frequency', 'is_active']
    list_filter = ['is_active', 'meeting_frequency', 'mentorship_focus']


@admin.register(BusinessAdvice)
class BusinessAdviceAdmin(admin.ModelAdmin):
    list_display = ['mentor', 'business', 'category', 'priority', 'implementation_status', 'created_at']
    list_filter = ['category', 'priority', 'implementation_status']


admin.site.register(MentorshipMessage)
