from decimal import Decimal

from rest_framework import serializers

from backend.youth.validators import validate_district_value
from .models import (
    BusinessProfile, BusinessYouthRelationship, BusinessTracking, BusinessTrackingAttachment,
    BusinessResource, BusinessResourceCost
)


class BusinessProfileSerializer(serializers.ModelSerializer):
    district = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    member_count = serializers.SerializerMethodField()

    class Meta:
        model = BusinessProfile
        exclude = ['youth']
        read_only_fields = ['created_at', 'updated_at']

    def get_member_count(self, obj):
        return obj.youth_relationships.filter(is_active=True).count()

    def validate_district(self, value):
        return validate_district_value(value)

    def validate_business_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Business name is required")
        return value


class BusinessYouthRelationshipSerializer(serializers.ModelSerializer):
    youth_name = serializers.CharField(source='youth.full_name', read_only=True)
    participant_code = serializers.CharField(source='youth.participant_code', read_only=True)
    business_name = serializers.CharField(source='business.business_name', read_only=True)

    class Meta:
        model = BusinessYouthRelationship
        fields = ['id', 'business', 'business_name', 'youth', 'youth_name', 'participant_code',
                  'role', 'join_date', 'is_active', 'created_at', 'updated_at']
        read_only_fields = ['business', 'created_at', 'updated_at']
        validators = []


class BusinessTrackingAttachmentSerializer(serializers.ModelSerializer):
    uploaded_by_username = serializers.CharField(source='uploaded_by.username', read_only=True)

    class Meta:
        model = BusinessTrackingAttachment
        fields = ['id', 'tracking', 'attachment_name', 'attachment_type', 'attachment_url',
                  'uploaded_by', 'uploaded_by_username', 'created_at']
        read_only_fields = ['tracking', 'uploaded_by', 'created_at']


class BusinessTrackingSerializer(serializers.ModelSerializer):
    business_name = serializers.CharField(source='business.business_name', read_only=True)
    recorded_by_username = serializers.CharField(source='recorded_by.username', read_only=True)
    mentor_name = serializers.CharField(source='mentor.name', read_only=True, default=None)
    attachments = BusinessTrackingAttachmentSerializer(many=True, read_only=True)

    class Meta:
        model = BusinessTracking
        fields = '__all__'
        read_only_fields = ['recorded_by', 'is_verified', 'verified_by', 'verification_date',
                            'created_at', 'updated_at']

    def validate(self, attrs):
        tracking_date = attrs.get('tracking_date')
        if tracking_date and 'tracking_year' not in attrs and not self.instance:
            attrs['tracking_year'] = tracking_date.year
        if tracking_date and 'tracking_month' not in attrs and not self.instance:
            attrs['tracking_month'] = tracking_date
        return attrs


class BusinessResourceCostSerializer(serializers.ModelSerializer):
    class Meta:
        model = BusinessResourceCost
        fields = ['id', 'resource', 'cost_type', 'amount', 'date', 'description', 'receipt',
                  'recorded_by', 'created_at', 'updated_at']
        read_only_fields = ['resource', 'recorded_by', 'created_at', 'updated_at']

    def validate_amount(self, value):
        if value is None or value <= Decimal('0'):
            raise serializers.ValidationError("Amount must be greater than 0")
        return value


class BusinessResourceSerializer(serializers.ModelSerializer):
    costs = BusinessResourceCostSerializer(many=True, read_only=True)

    class Meta:
        model = BusinessResource
        fields = ['id', 'business', 'name', 'category', 'description', 'status', 'quantity',
                  'acquisition_date', 'unit_cost', 'total_cost', 'supplier', 'notes', 'created_by',
                  'costs', 'created_at', 'updated_at']
        read_only_fields = ['business', 'total_cost', 'created_by', 'created_at', 'updated_at']

    def validate_quantity(self, value):
        if value is not None and value < 0:
            raise serializers.ValidationError("Quantity cannot be negative")
        return value

    def validate_unit_cost(self, value):
        if value is not None and value < 0:
            raise serializers.ValidationError("Unit cost cannot be negative")
        return value
