from rest_framework import serializers
from .models import Role, Permission, RolePermission
from .registry import ACTIONS, RESOURCES


class RoleSerializer(serializers.ModelSerializer):
    permission_count = serializers.SerializerMethodField()

    class Meta:
        model = Role
        fields = ['id', 'name', 'display_name', 'description', 'is_system', 'is_editable',
                  'is_active', 'permission_count', 'created_at', 'updated_at']
        read_only_fields = ['created_at', 'updated_at']
        # Duplicate names are reported as 409 by the views
        extra_kwargs = {'name': {'validators': []}}

    def get_permission_count(self, obj):
        return obj.role_permissions.count()

    def validate_name(self, value):
        value = value.strip().lower()
        if not value:
            raise serializers.ValidationError("Role name is required")
        return value


class PermissionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Permission
        fields = ['id', 'resource', 'action', 'description', 'created_at', 'updated_at']


class RolePermissionSerializer(serializers.ModelSerializer):
    role_name = serializers.CharField(source='role.name', read_only=True)

    class Meta:
        model = RolePermission
        fields = ['id', 'role', 'role_name', 'resource', 'action', 'created_at']


class PermissionGrantSerializer(serializers.Serializer):
    """Body of the add/remove role-permission endpoints"""
    role = serializers.CharField()
    resource = serializers.ChoiceField(choices=RESOURCES)
    action = serializers.ChoiceField(choices=ACTIONS)


class PermissionChangeSerializer(serializers.Serializer):
    resource = serializers.ChoiceField(choices=RESOURCES)
    action = serializers.ChoiceField(choices=ACTIONS)
    granted = serializers.BooleanField()


class BatchPermissionSerializer(serializers.Serializer):
    role = serializers.CharField()
    permissions = PermissionChangeSerializer(many=True)
