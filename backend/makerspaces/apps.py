from django.apps import AppConfig


class MakerspacesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'backend.makerspaces'
