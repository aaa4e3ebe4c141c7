import re

from rest_framework import serializers
from django.contrib.auth import get_user_model
from core.constants import PHONE_NUMBER_REGEX
import logging

User = get_user_model()
logger = logging.getLogger(__name__)


class UserSerializer(serializers.ModelSerializer):
    name = serializers.CharField(source='display_name', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'username', 'first_name', 'last_name', 'name', 'email', 'phone_number']
        read_only_fields = fields


class UserSummarySerializer(serializers.ModelSerializer):
    """Minimal participant details embedded in orders and notifications."""
    name = serializers.CharField(source='display_name', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'name', 'email']
        read_only_fields = fields


class UserUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ['first_name', 'last_name', 'email', 'phone_number']

    def validate_email(self, value):
        return value or None

    def validate_phone_number(self, value):
        if not value:
            return None
        if not re.match(PHONE_NUMBER_REGEX, value):
            raise serializers.ValidationError("Phone number must be in international format, e.g. +251911223344.")
        return value


class LoginSerializer(serializers.Serializer):
    identifier = serializers.CharField(max_length=255, trim_whitespace=True)
    password = serializers.CharField(max_length=128, write_only=True)

    def validate(self, data):
        identifier = data.get('identifier').strip()
        user = User.get_by_identifier(identifier)
        if not user or not user.check_password(data.get('password')):
            logger.warning(f"Failed login attempt for identifier: {identifier}")
            raise serializers.ValidationError("Invalid credentials.")
        if not user.is_active:
            raise serializers.ValidationError("User account is disabled. Please contact support.")
        data['user'] = user
        return data
