from django.contrib import admin
from .models import Sale, SaleItem


class SaleItemInline(admin.TabularInline):
    model = SaleItem
    extra = 0
    readonly_fields = ['total']


@admin.register(Sale)
class SaleAdmin(admin.ModelAdmin):
    list_display = ['reference', 'client_name', 'total', 'status', 'payment_method', 'production_status', 'company']
    list_filter = ['status', 'payment_method', 'company']
    search_fields = ['client_name']
    readonly_fields = ['total', 'quote', 'created_at', 'updated_at']
    inlines = [SaleItemInline]
