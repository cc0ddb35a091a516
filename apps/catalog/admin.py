from django.contrib import admin
from .models import Product, Service


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'price', 'measurement_unit', 'company']
    list_filter = ['measurement_unit', 'company']
    search_fields = ['name', 'category']


@admin.register(Service)
class ServiceAdmin(admin.ModelAdmin):
    list_display = ['name', 'price', 'duration', 'company']
    list_filter = ['company']
    search_fields = ['name']
