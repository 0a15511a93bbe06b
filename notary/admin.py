from django.contrib import admin
from .models import ChainTransaction


@admin.register(ChainTransaction)
class ChainTransactionAdmin(admin.ModelAdmin):
    list_display = ['tx_hash', 'action', 'entity_type', 'entity_id', 'status', 'created_at']
    list_filter = ['action', 'status']
    search_fields = ['tx_hash', 'entity_id']
    readonly_fields = ['created_at', 'checked_at']
