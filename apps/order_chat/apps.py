from django.apps import AppConfig


class OrderChatConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.order_chat'
