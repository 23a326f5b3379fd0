from django.contrib import admin
from .models import YouthProfile, Education, Certification, Skill, YouthSkill, TrainingProgram, YouthTraining


class EducationInline(admin.TabularInline):
    model = Education
    extra = 0


class YouthTrainingInline(admin.TabularInline):
    model = YouthTraining
    extra = 0


@admin.register(YouthProfile)
class YouthProfileAdmin(admin.ModelAdmin):
    list_display = ['participant_code', 'full_name', 'gender', 'district', 'dare_model', 'is_deleted', 'created_at']
    list_filter = ['district', 'dare_model', 'gender', 'is_deleted']
    search_fields = ['participant_code', 'full_name', 'phone_number']
    inlines = [EducationInline, YouthTrainingInline]


@admin.register(Education)
class EducationAdmin(admin.ModelAdmin):
    list_display = ['youth', 'qualification_type', 'qualification_name', 'qualification_status', 'graduation_year']
    list_filter = ['qualification_status', 'qualification_type']


@admin.register(Certification)
class CertificationAdmin(admin.ModelAdmin):
    list_display = ['youth', 'certification_name', 'issuing_organization', 'issue_date', 'expiry_date']


@admin.register(Skill)
class SkillAdmin(admin.ModelAdmin):
    list_display = ['name', 'is_active']
    search_fields = ['name']


@admin.register(YouthSkill)
class YouthSkillAdmin(admin.ModelAdmin):
    list_display = ['youth', 'skill', 'proficiency', 'is_primary']
    list_filter = ['proficiency']


@admin.register(TrainingProgram)
class TrainingProgramAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'total_modules']


@admin.register(YouthTraining)
class YouthTrainingAdmin(admin.ModelAdmin):
    list_display = ['youth', 'program', 'status', 'start_date', 'completion_date', 'certification_received']
    list_filter = ['status', 'program']
