from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone

from backend.core.models import DISTRICT_CHOICES, normalize_district


class Mentor(models.Model):
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='mentor_profile')
    name = models.CharField(max_length=255)
    phone = models.CharField(max_length=30, blank=True, null=True)
    email = models.EmailField(blank=True, null=True)
    assigned_district = models.CharField(max_length=50, choices=DISTRICT_CHOICES, blank=True, null=True)
    specialization = models.CharField(max_length=255, blank=True, null=True)
    bio = models.TextField(blank=True, null=True)
    profile_picture = models.CharField(max_length=500, blank=True, null=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        self.assigned_district = normalize_district(self.assigned_district)
        super().save(*args, **kwargs)

    def has_history(self):
        """True once the mentor has assignments, messages or advice on record"""
        return (
            self.business_relationships.exists()
            or self.messages.exists()
            or self.advice.exists()
        )

    class Meta:
        db_table = 'mentors'
        ordering = ['name']


class MentorBusinessRelationship(models.Model):
    FOCUS_CHOICES = [
        ('Business Growth', 'Business Growth'),
        ('Operations Improvement', 'Operations Improvement'),
        ('Market Expansion', 'Market Expansion'),
        ('Financial Management', 'Financial Management'),
        ('Team Development', 'Team Development'),
    ]
    FREQUENCY_CHOICES = [
        ('Weekly', 'Weekly'),
        ('Bi-weekly', 'Bi-weekly'),
        ('Monthly', 'Monthly'),
        ('Quarterly', 'Quarterly'),
        ('As Needed', 'As Needed'),
    ]

    mentor = models.ForeignKey(Mentor, on_delete=models.CASCADE, related_name='business_relationships')
    business = models.ForeignKey('businesses.BusinessProfile', on_delete=models.CASCADE, related_name='mentor_relationships')
    assigned_date = models.DateField(default=timezone.localdate)
    is_active = models.BooleanField(default=True)
    mentorship_focus = models.CharField(max_length=50, choices=FOCUS_CHOICES, blank=True, null=True)
    meeting_frequency = models.CharField(max_length=20, choices=FREQUENCY_CHOICES, default='Monthly')
    last_meeting_date = models.DateField(blank=True, null=True)
    next_meeting_date = models.DateField(blank=True, null=True)
    mentorship_goals = models.JSONField(default=list, blank=True)
    mentorship_progress = models.TextField(blank=True, null=True)
    progress_rating = models.IntegerField(blank=True, null=True, validators=[MinValueValidator(1), MaxValueValidator(5)])
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.mentor} -> {self.business}"

    class Meta:
        db_table = 'mentor_business_relationships'
        unique_together = [['mentor', 'business']]
        ordering = ['-assigned_date']


class MentorshipMessage(models.Model):
    SENDER_CHOICES = [
        ('mentor', 'Mentor'),
        ('business', 'Business'),
    ]
    CATEGORY_CHOICES = [
        ('operations', 'Operations'),
        ('marketing', 'Marketing'),
        ('finance', 'Finance'),
        ('management', 'Management'),
        ('strategy', 'Strategy'),
        ('other', 'Other'),
    ]

    mentor = models.ForeignKey(Mentor, on_delete=models.CASCADE, related_name='messages')
    business = models.ForeignKey('businesses.BusinessProfile', on_delete=models.CASCADE, related_name='mentorship_messages')
    message = models.TextField()
    sender = models.CharField(max_length=20, choices=SENDER_CHOICES)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES, blank=True, null=True)
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'mentorship_messages'
        ordering = ['created_at']


class BusinessAdvice(models.Model):
    CATEGORY_CHOICES = MentorshipMessage.CATEGORY_CHOICES
    STATUS_CHOICES = [
        ('pending', 'Pending'),
        ('in_progress', 'In Progress'),
        ('implemented', 'Implemented'),
        ('postponed', 'Postponed'),
    ]
    PRIORITY_CHOICES = [
        ('high', 'High'),
        ('medium', 'Medium'),
        ('low', 'Low'),
    ]

    mentor = models.ForeignKey(Mentor, on_delete=models.CASCADE, related_name='advice')
    business = models.ForeignKey('businesses.BusinessProfile', on_delete=models.CASCADE, related_name='advice')
    advice_content = models.TextField()
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES)
    follow_up_notes = models.TextField(blank=True, null=True)
    implementation_status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='pending')
    priority = models.CharField(max_length=10, choices=PRIORITY_CHOICES, default='medium')
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name='advice_created')
    updated_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name='advice_updated')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'business_advice'
        ordering = ['-created_at']
