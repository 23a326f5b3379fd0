from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from backend.core.models import DARE_MODEL_CHOICES, DISTRICT_CHOICES, normalize_district


class YouthProfile(models.Model):
    """Program participant"""
    GENDER_CHOICES = [
        ('Male', 'Male'),
        ('Female', 'Female'),
        ('Other', 'Other'),
    ]

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name='youth_profiles')

    # Identification
    participant_code = models.CharField(max_length=50, unique=True, blank=True, null=True)
    full_name = models.CharField(max_length=255, blank=True)
    preferred_name = models.CharField(max_length=100, blank=True, null=True)
    profile_picture = models.CharField(max_length=500, blank=True, null=True)

    # Personal info
    first_name = models.CharField(max_length=100, blank=True, null=True)
    middle_name = models.CharField(max_length=100, blank=True, null=True)
    last_name = models.CharField(max_length=100, blank=True, null=True)
    date_of_birth = models.DateField(blank=True, null=True)
    year_of_birth = models.IntegerField(blank=True, null=True)
    age = models.IntegerField(blank=True, null=True)
    age_group = models.CharField(max_length=50, blank=True, null=True)
    gender = models.CharField(max_length=20, choices=GENDER_CHOICES, blank=True, null=True)
    marital_status = models.CharField(max_length=50, blank=True, null=True)
    children_count = models.IntegerField(default=0, validators=[MinValueValidator(0)])
    dependents = models.TextField(blank=True, null=True)
    national_id = models.CharField(max_length=50, blank=True, null=True)
    pwd_status = models.CharField(max_length=50, blank=True, null=True)

    # Location & contact
    district = models.CharField(max_length=50, choices=DISTRICT_CHOICES, blank=True, null=True)
    town = models.CharField(max_length=100, blank=True, null=True)
    home_address = models.TextField(blank=True, null=True)
    country = models.CharField(max_length=100, default='Ghana')
    admin_level_1 = models.CharField(max_length=100, blank=True, null=True)
    admin_level_2 = models.CharField(max_length=100, blank=True, null=True)
    phone_number = models.CharField(max_length=30, blank=True, null=True)
    additional_phone_number_1 = models.CharField(max_length=30, blank=True, null=True)
    additional_phone_number_2 = models.CharField(max_length=30, blank=True, null=True)
    email = models.EmailField(blank=True, null=True)
    emergency_contact = models.JSONField(default=dict, blank=True)

    # Education & skills summary
    highest_education_level = models.CharField(max_length=100, blank=True, null=True)
    active_student_status = models.BooleanField(default=False)
    core_skills = models.TextField(blank=True, null=True)
    skill_level = models.CharField(max_length=50, blank=True, null=True)
    industry_expertise = models.TextField(blank=True, null=True)
    languages_spoken = models.JSONField(default=list, blank=True)
    digital_skills = models.TextField(blank=True, null=True)
    years_of_experience = models.IntegerField(blank=True, null=True, validators=[MinValueValidator(0)])
    work_history = models.TextField(blank=True, null=True)

    # Program participation
    business_interest = models.TextField(blank=True, null=True)
    employment_status = models.CharField(max_length=100, blank=True, null=True)
    specific_job = models.CharField(max_length=255, blank=True, null=True)
    training_status = models.CharField(max_length=100, blank=True, null=True)
    program_status = models.CharField(max_length=100, blank=True, null=True)
    transition_status = models.CharField(max_length=100, blank=True, null=True)
    onboarded_to_tracker = models.BooleanField(default=False)
    dare_model = models.CharField(max_length=20, choices=DARE_MODEL_CHOICES, blank=True, null=True)

    # Madam / apprentice, mentor and guarantor
    madam_name = models.CharField(max_length=255, blank=True, null=True)
    madam_phone = models.CharField(max_length=30, blank=True, null=True)
    local_mentor_name = models.CharField(max_length=255, blank=True, null=True)
    local_mentor_contact = models.CharField(max_length=100, blank=True, null=True)
    guarantor = models.CharField(max_length=255, blank=True, null=True)
    guarantor_phone = models.CharField(max_length=30, blank=True, null=True)

    # Partner & refugee support
    implementing_partner_name = models.CharField(max_length=255, blank=True, null=True)
    refugee_status = models.BooleanField(default=False)
    idp_status = models.BooleanField(default=False)
    community_hosts_refugees = models.BooleanField(default=False)
    host_community_status = models.CharField(max_length=100, blank=True, null=True)

    # Program details
    partner_start_date = models.DateField(blank=True, null=True)
    program_name = models.CharField(max_length=255, blank=True, null=True)
    program_details = models.TextField(blank=True, null=True)
    program_contact_person = models.CharField(max_length=255, blank=True, null=True)
    program_contact_phone_number = models.CharField(max_length=30, blank=True, null=True)
    cohort = models.CharField(max_length=50, blank=True, null=True)

    new_data_submission = models.BooleanField(default=False)
    is_deleted = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.full_name or self.participant_code or f"Youth #{self.pk}"

    def save(self, *args, **kwargs):
        if not self.full_name:
            parts = [self.first_name, self.middle_name, self.last_name]
            self.full_name = ' '.join(p.strip() for p in parts if p and p.strip())
        self.district = normalize_district(self.district)
        if not self.participant_code:
            self.participant_code = None
        super().save(*args, **kwargs)

    class Meta:
        db_table = 'youth_profiles'
        ordering = ['full_name']
        indexes = [
            models.Index(fields=['district'], name='youth_profi_distric_a61c2e_idx'),
            models.Index(fields=['dare_model'], name='youth_profi_dare_mo_3f90d4_idx'),
        ]


class Education(models.Model):
    QUALIFICATION_STATUS_CHOICES = [
        ('Completed', 'Completed'),
        ('In Progress', 'In Progress'),
        ('Incomplete', 'Incomplete'),
    ]

    youth = models.ForeignKey(YouthProfile, on_delete=models.CASCADE, related_name='education')
    qualification_type = models.CharField(max_length=100)
    qualification_name = models.CharField(max_length=255)
    specialization = models.CharField(max_length=255, blank=True, null=True)
    level_completed = models.CharField(max_length=100, blank=True, null=True)
    institution = models.CharField(max_length=255, blank=True, null=True)
    graduation_year = models.IntegerField(blank=True, null=True, validators=[MinValueValidator(1950), MaxValueValidator(2100)])
    is_highest_qualification = models.BooleanField(default=False)
    certificate_url = models.CharField(max_length=500, blank=True, null=True)
    qualification_status = models.CharField(max_length=20, choices=QUALIFICATION_STATUS_CHOICES, default='Completed')
    additional_details = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.qualification_name} ({self.youth})"

    class Meta:
        db_table = 'education'
        ordering = ['-is_highest_qualification', '-graduation_year']


class Certification(models.Model):
    youth = models.ForeignKey(YouthProfile, on_delete=models.CASCADE, related_name='certifications')
    certification_name = models.CharField(max_length=255)
    issuing_organization = models.CharField(max_length=255, blank=True, null=True)
    issue_date = models.DateField(blank=True, null=True)
    expiry_date = models.DateField(blank=True, null=True)
    credential_id = models.CharField(max_length=100, blank=True, null=True)
    credential_url = models.CharField(max_length=500, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.certification_name

    class Meta:
        db_table = 'certifications'
        ordering = ['-issue_date']


class Skill(models.Model):
    name = models.CharField(max_length=255, unique=True)
    description = models.TextField(blank=True, null=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name

    class Meta:
        db_table = 'skills'
        ordering = ['name']


class YouthSkill(models.Model):
    PROFICIENCY_CHOICES = [
        ('Beginner', 'Beginner'),
        ('Intermediate', 'Intermediate'),
        ('Advanced', 'Advanced'),
        ('Expert', 'Expert'),
    ]

    youth = models.ForeignKey(YouthProfile, on_delete=models.CASCADE, related_name='youth_skills')
    skill = models.ForeignKey(Skill, on_delete=models.CASCADE, related_name='youth_skills')
    proficiency = models.CharField(max_length=20, choices=PROFICIENCY_CHOICES, default='Intermediate')
    is_primary = models.BooleanField(default=False)
    years_of_experience = models.IntegerField(default=0, validators=[MinValueValidator(0)])
    notes = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.youth} - {self.skill}"

    class Meta:
        db_table = 'youth_skills'
        unique_together = [['youth', 'skill']]


class TrainingProgram(models.Model):
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    category = models.CharField(max_length=100, blank=True, null=True)
    total_modules = models.IntegerField(default=0, validators=[MinValueValidator(0)])
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name

    class Meta:
        db_table = 'training_programs'
        ordering = ['name']


class YouthTraining(models.Model):
    STATUS_CHOICES = [
        ('In Progress', 'In Progress'),
        ('Completed', 'Completed'),
        ('Dropped', 'Dropped'),
    ]

    youth = models.ForeignKey(YouthProfile, on_delete=models.CASCADE, related_name='training')
    program = models.ForeignKey(TrainingProgram, on_delete=models.CASCADE, related_name='enrolments')
    start_date = models.DateField(blank=True, null=True)
    completion_date = models.DateField(blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='In Progress')
    certification_received = models.BooleanField(default=False)
    notes = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.youth} - {self.program} ({self.status})"

    class Meta:
        db_table = 'youth_training'
        ordering = ['-start_date']
