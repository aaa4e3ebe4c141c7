from django.contrib import admin
from .models import Gig


@admin.register(Gig)
class GigAdmin(admin.ModelAdmin):
    list_display = ('title', 'created_by', 'category', 'price', 'status', 'views', 'orders', 'created_at')
    list_filter = ('status', 'category')
    search_fields = ('title', 'created_by__username')
    readonly_fields = ('views', 'orders', 'rating', 'review_count')
