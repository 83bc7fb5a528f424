from django.contrib import admin

from modules.accounts.models import Account


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ["account_number", "customer_id", "account_type", "branch_address"]
    search_fields = ["account_number", "customer_id"]
    readonly_fields = ["created_at", "created_by", "updated_at", "updated_by"]
