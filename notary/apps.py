from django.apps import AppConfig


class NotaryConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "notary"
