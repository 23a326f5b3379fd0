from django.apps import AppConfig


class AccessConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'backend.access'
    verbose_name = 'Roles and Permissions'
