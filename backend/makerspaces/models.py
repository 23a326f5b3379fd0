from django.conf import settings
from django.db import models
from django.utils import timezone


class Makerspace(models.Model):
    """Shared workshop that program businesses can be assigned to"""
    STATUS_CHOICES = [
        ('Active', 'Active'),
        ('Inactive', 'Inactive'),
        ('Under Construction', 'Under Construction'),
    ]

    name = models.CharField(max_length=200)
    description = models.TextField(blank=True, null=True)
    address = models.TextField()
    coordinates = models.CharField(max_length=100, blank=True, null=True)
    district = models.CharField(max_length=100)
    contact_phone = models.CharField(max_length=30, blank=True, null=True)
    contact_email = models.EmailField(blank=True, null=True)
    contact_person = models.CharField(max_length=255, blank=True, null=True)
    operating_hours = models.CharField(max_length=255, blank=True, null=True)
    open_date = models.DateField(blank=True, null=True)
    facilities = models.TextField(blank=True, null=True)
    status = models.CharField(max_length=30, choices=STATUS_CHOICES, default='Active')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name

    class Meta:
        db_table = 'makerspaces'
        ordering = ['name']


class BusinessMakerspaceAssignment(models.Model):
    business = models.ForeignKey('businesses.BusinessProfile', on_delete=models.CASCADE, related_name='makerspace_assignments')
    makerspace = models.ForeignKey(Makerspace, on_delete=models.CASCADE, related_name='business_assignments')
    assigned_date = models.DateTimeField(default=timezone.now)
    assigned_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name='makerspace_assignments')
    notes = models.TextField(blank=True, null=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.business} @ {self.makerspace}"

    class Meta:
        db_table = 'business_makerspace_assignments'
        unique_together = [['business', 'makerspace']]
