from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from backend.access.models import Role
from backend.youth.validators import validate_district_value
from .models import User, Setting, AuditLog


def validate_role_name(value):
    """Users may only be given a role that exists and is active"""
    if not Role.objects.filter(name=value, is_active=True).exists():
        raise serializers.ValidationError(f"Role '{value}' does not exist or is inactive")
    return value


class UserSerializer(serializers.ModelSerializer):
    district = serializers.CharField(required=False, allow_null=True, allow_blank=True)

    class Meta:
        model = User
        fields = ['id', 'username', 'email', 'first_name', 'last_name', 'full_name', 'role', 'district',
                  'phone', 'profile_picture', 'is_active', 'is_superuser', 'created_at', 'updated_at']
        read_only_fields = ['is_superuser', 'created_at', 'updated_at']

    def validate_district(self, value):
        return validate_district_value(value)

    def validate_role(self, value):
        return validate_role_name(value)


class UserCreateSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True, validators=[validate_password])
    password_confirm = serializers.CharField(write_only=True)
    district = serializers.CharField(required=False, allow_null=True, allow_blank=True)

    class Meta:
        model = User
        fields = ['username', 'email', 'password', 'password_confirm', 'first_name', 'last_name',
                  'full_name', 'role', 'district', 'phone']

    def validate_district(self, value):
        return validate_district_value(value)

    def validate_role(self, value):
        return validate_role_name(value)

    def validate(self, attrs):
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({"password": "Passwords don't match"})
        return attrs

    def create(self, validated_data):
        validated_data.pop('password_confirm')
        password = validated_data.pop('password')
        # Ensure user is active by default
        user = User(**validated_data, is_active=True)
        user.set_password(password)
        user.save()
        return user


class SettingSerializer(serializers.ModelSerializer):
    class Meta:
        model = Setting
        fields = ['id', 'key', 'value', 'description', 'updated_at']


class AuditLogSerializer(serializers.ModelSerializer):
    username = serializers.CharField(source='user.username', read_only=True, default=None)

    class Meta:
        model = AuditLog
        fields = ['id', 'user', 'username', 'action', 'model_name', 'object_id',
                  'object_name', 'changes', 'ip_address', 'created_at']
