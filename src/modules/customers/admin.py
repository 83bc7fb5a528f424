from django.contrib import admin

from modules.customers.models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ["customer_id", "name", "email", "mobile_number", "created_at"]
    search_fields = ["name", "email", "mobile_number"]
    readonly_fields = ["created_at", "created_by", "updated_at", "updated_by"]
