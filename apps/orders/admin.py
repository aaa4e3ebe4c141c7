from django.contrib import admin
from .models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ('id', 'gig', 'client', 'freelancer', 'amount', 'status', 'created_at')
    list_filter = ('status',)
    search_fields = ('gig__title', 'client__username', 'freelancer__username')
    readonly_fields = ('amount',)
