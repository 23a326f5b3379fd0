from django.contrib.auth.models import AbstractUser
from django.db import models


DISTRICT_CHOICES = [
    ('Bekwai', 'Bekwai'),
    ('Gushegu', 'Gushegu'),
    ('Lower Manya Krobo', 'Lower Manya Krobo'),
    ('Yilo Krobo', 'Yilo Krobo'),
]

DARE_MODEL_CHOICES = [
    ('Collaborative', 'Collaborative'),
    ('MakerSpace', 'MakerSpace'),
    ('Madam Anchor', 'Madam Anchor'),
]


def normalize_district(value):
    """Strip the ', Ghana' suffix that imported records carry"""
    if not value:
        return value
    value = value.strip()
    if value.endswith(', Ghana'):
        value = value[:-len(', Ghana')].strip()
    return value


class User(AbstractUser):
    """Program user; `role` names an active row in access.Role"""
    full_name = models.CharField(max_length=255, blank=True)
    role = models.CharField(max_length=50, default='mentee')
    district = models.CharField(max_length=50, choices=DISTRICT_CHOICES, blank=True, null=True)
    phone = models.CharField(max_length=20, blank=True, null=True)
    profile_picture = models.CharField(max_length=500, blank=True, null=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'users'

    @property
    def is_admin_role(self):
        return self.is_superuser or self.role == 'admin'

    def save(self, *args, **kwargs):
        if not self.full_name:
            self.full_name = f'{self.first_name} {self.last_name}'.strip() or self.username
        self.district = normalize_district(self.district)
        super().save(*args, **kwargs)


class Setting(models.Model):
    """System settings"""
    key = models.CharField(max_length=100, unique=True)
    value = models.TextField()
    description = models.TextField(blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.key

    class Meta:
        db_table = 'settings'


class AuditLog(models.Model):
    """Activity log of create/update/delete operations across the program"""
    ACTION_CHOICES = [
        ('create', 'Create'),
        ('update', 'Update'),
        ('delete', 'Delete'),
        ('deactivate', 'Deactivate'),
        ('verify', 'Verify'),
        ('submit', 'Submit'),
        ('review', 'Review'),
        ('assign', 'Assign'),
        ('unassign', 'Unassign'),
        ('grant', 'Permission Granted'),
        ('revoke', 'Permission Revoked'),
        ('clear_data', 'Data Cleared'),
    ]

    user = models.ForeignKey(User, on_delete=models.SET_NULL, null=True, related_name='audit_logs')
    action = models.CharField(max_length=50, choices=ACTION_CHOICES)
    model_name = models.CharField(max_length=100)
    object_id = models.CharField(max_length=100)
    object_name = models.CharField(max_length=255, blank=True, null=True, help_text="Human-readable name of the object (e.g., youth name, business name)")
    changes = models.JSONField(default=dict, blank=True)
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'audit_logs'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['-created_at'], name='audit_logs_created_d3f1a2_idx'),
            models.Index(fields=['action'], name='audit_logs_action_8b2c4e_idx'),
            models.Index(fields=['model_name'], name='audit_logs_model_n_5e7a91_idx'),
        ]
