from django.contrib import admin
from .models import MLVerification


@admin.register(MLVerification)
class MLVerificationAdmin(admin.ModelAdmin):
    list_display = ['project', 'recommendation', 'carbon_estimate', 'biomass_health_score', 'model_version', 'created_at']
    list_filter = ['recommendation', 'model_version']
    search_fields = ['project__name', 'verifier__email']
    readonly_fields = ['created_at']
