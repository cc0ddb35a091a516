from django.contrib import admin
from .models import Quote, QuoteItem, Payment


class QuoteItemInline(admin.TabularInline):
    model = QuoteItem
    extra = 0
    readonly_fields = ['total']


class PaymentInline(admin.TabularInline):
    model = Payment
    extra = 0
    readonly_fields = ['created_at']


@admin.register(Quote)
class QuoteAdmin(admin.ModelAdmin):
    list_display = ['reference', 'client_name', 'total', 'status', 'production_status', 'valid_until', 'company']
    list_filter = ['status', 'production_status', 'company']
    search_fields = ['client_name', 'client_phone']
    readonly_fields = ['total', 'created_at', 'updated_at']
    inlines = [QuoteItemInline, PaymentInline]
