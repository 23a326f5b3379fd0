from rest_framework import serializers
from .models import Makerspace, BusinessMakerspaceAssignment


class MakerspaceSerializer(serializers.ModelSerializer):
    business_count = serializers.SerializerMethodField()

    class Meta:
        model = Makerspace
        fields = ['id', 'name', 'description', 'address', 'coordinates', 'district', 'contact_phone',
                  'contact_email', 'contact_person', 'operating_hours', 'open_date', 'facilities',
                  'status', 'business_count', 'created_at', 'updated_at']

    def get_business_count(self, obj):
        return obj.business_assignments.filter(is_active=True).count()


class BusinessMakerspaceAssignmentSerializer(serializers.ModelSerializer):
    business_name = serializers.CharField(source='business.business_name', read_only=True)
    makerspace_name = serializers.CharField(source='makerspace.name', read_only=True)

    class Meta:
        model = BusinessMakerspaceAssignment
        fields = ['id', 'business', 'business_name', 'makerspace', 'makerspace_name', 'assigned_date',
                  'assigned_by', 'notes', 'is_active', 'created_at']
        read_only_fields = ['makerspace', 'assigned_by', 'created_at']
        validators = []
