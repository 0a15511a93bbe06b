from django.contrib import admin
from .models import Project


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ['name', 'ecosystem_type', 'area', 'status', 'manager', 'created_at']
    list_filter = ['status', 'ecosystem_type']
    search_fields = ['name', 'location', 'manager__email']
    readonly_fields = ['created_at', 'updated_at', 'on_chain_tx_hash']
