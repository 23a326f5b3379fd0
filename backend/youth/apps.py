from django.apps import AppConfig


class YouthConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'backend.youth'
    verbose_name = 'Youth Profiles'
