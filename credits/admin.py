from django.contrib import admin
from .models import CarbonCredit, CreditHolding, Retirement


@admin.register(CarbonCredit)
class CarbonCreditAdmin(admin.ModelAdmin):
    list_display = ['id', 'project', 'amount', 'available_balance', 'remaining_balance', 'owner', 'is_retired']
    list_filter = ['is_retired']
    search_fields = ['project__name', 'owner__email']
    readonly_fields = ['created_at', 'updated_at', 'on_chain_tx_hash']


@admin.register(CreditHolding)
class CreditHoldingAdmin(admin.ModelAdmin):
    list_display = ['credit', 'buyer', 'balance', 'updated_at']
    search_fields = ['buyer__email']


@admin.register(Retirement)
class RetirementAdmin(admin.ModelAdmin):
    list_display = ['id', 'credit', 'buyer', 'amount', 'retired_at']
    search_fields = ['buyer__email', 'reason']
    readonly_fields = ['retired_at', 'on_chain_tx_hash']
