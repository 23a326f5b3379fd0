from django.db import models

from .registry import ACTIONS, RESOURCES


class Role(models.Model):
    """Named role; users reference it through User.role"""
    name = models.CharField(max_length=50, unique=True)
    display_name = models.CharField(max_length=100, blank=True, null=True)
    description = models.TextField(blank=True, null=True)
    is_system = models.BooleanField(default=False)
    is_editable = models.BooleanField(default=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.display_name or self.name

    class Meta:
        db_table = 'roles'
        ordering = ['name']


class Permission(models.Model):
    RESOURCE_CHOICES = [(r, r) for r in RESOURCES]
    ACTION_CHOICES = [(a, a) for a in ACTIONS]

    resource = models.CharField(max_length=50, choices=RESOURCE_CHOICES)
    action = models.CharField(max_length=20, choices=ACTION_CHOICES)
    description = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.resource}:{self.action}"

    class Meta:
        db_table = 'permissions'
        ordering = ['resource', 'action']
        unique_together = [['resource', 'action']]


class RolePermission(models.Model):
    role = models.ForeignKey(Role, on_delete=models.CASCADE, related_name='role_permissions')
    resource = models.CharField(max_length=50)
    action = models.CharField(max_length=20)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.role.name} -> {self.resource}:{self.action}"

    class Meta:
        db_table = 'role_permissions'
        ordering = ['role', 'resource', 'action']
        unique_together = [['role', 'resource', 'action']]
        indexes = [
            models.Index(fields=['resource', 'action'], name='role_permis_resourc_4c1d7b_idx'),
        ]
