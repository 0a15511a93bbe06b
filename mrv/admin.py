from django.contrib import admin
from .models import MRVData


@admin.register(MRVData)
class MRVDataAdmin(admin.ModelAdmin):
    list_display = ['id', 'project', 'status', 'carbon_estimate', 'biomass_health_score', 'submitted_at', 'verified_by']
    list_filter = ['status', 'recommendation']
    search_fields = ['project__name', 'manager__email']
    readonly_fields = [
        'submitted_at', 'carbon_estimate', 'biomass_health_score',
        'evidence_cid', 'recommendation', 'risk_factors', 'model_version',
    ]
