from rest_framework import serializers

from backend.youth.validators import validate_district_value
from .models import Mentor, MentorBusinessRelationship, MentorshipMessage, BusinessAdvice


class MentorSerializer(serializers.ModelSerializer):
    assigned_district = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    username = serializers.CharField(source='user.username', read_only=True)
    active_business_count = serializers.SerializerMethodField()

    class Meta:
        model = Mentor
        fields = ['id', 'user', 'username', 'name', 'phone', 'email', 'assigned_district', 'specialization',
                  'bio', 'profile_picture', 'is_active', 'active_business_count', 'created_at', 'updated_at']
        read_only_fields = ['created_at', 'updated_at']

    def get_active_business_count(self, obj):
        return obj.business_relationships.filter(is_active=True).count()

    def validate_assigned_district(self, value):
        return validate_district_value(value)


class MentorBusinessRelationshipSerializer(serializers.ModelSerializer):
    class Meta:
        model = MentorBusinessRelationship
        fields = ['id', 'mentor', 'business', 'assigned_date', 'is_active', 'mentorship_focus',
                  'meeting_frequency', 'last_meeting_date', 'next_meeting_date', 'mentorship_goals',
                  'mentorship_progress', 'progress_rating', 'created_at', 'updated_at']
        read_only_fields = ['created_at', 'updated_at']
        # Duplicate assignments are reported as 409 by the views
        validators = []


class MentorBusinessDetailedSerializer(MentorBusinessRelationshipSerializer):
    """Assignment with mentor and business summaries"""
    mentor_name = serializers.CharField(source='mentor.name', read_only=True)
    mentor_email = serializers.CharField(source='mentor.email', read_only=True)
    business_name = serializers.CharField(source='business.business_name', read_only=True)
    business_district = serializers.CharField(source='business.district', read_only=True)

    class Meta(MentorBusinessRelationshipSerializer.Meta):
        fields = MentorBusinessRelationshipSerializer.Meta.fields + [
            'mentor_name', 'mentor_email', 'business_name', 'business_district'
        ]


class MentorshipMessageSerializer(serializers.ModelSerializer):
    class Meta:
        model = MentorshipMessage
        fields = ['id', 'mentor', 'business', 'message', 'sender', 'category', 'is_read', 'created_at']
        read_only_fields = ['is_read', 'created_at']


class BusinessAdviceSerializer(serializers.ModelSerializer):
    mentor_name = serializers.CharField(source='mentor.name', read_only=True)

    class Meta:
        model = BusinessAdvice
        fields = ['id', 'mentor', 'mentor_name', 'business', 'advice_content', 'category', 'follow_up_notes',
                  'implementation_status', 'priority', 'created_by', 'updated_by', 'created_at', 'updated_at']
        read_only_fields = ['created_by', 'updated_by', 'created_at', 'updated_at']
