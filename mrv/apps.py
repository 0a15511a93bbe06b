from django.apps import AppConfig


class MrvConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "mrv"
    verbose_name = "MRV"
