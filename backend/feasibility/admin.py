from django.contrib import admin
from .models import FeasibilityAssessment


@admin.register(FeasibilityAssessment)
class FeasibilityAssessmentAdmin(admin.ModelAdmin):
    list_display = ['id', 'business', 'youth', 'status', 'overall_feasibility_percentage', 'assessment_date', 'reviewed_by']
    list_filter = ['status', 'is_plan_feasible']
    search_fields = ['business__business_name', 'youth__full_name']
    readonly_fields = ['reviewed_by', 'review_date', 'created_at', 'updated_at']
