from rest_framework import serializers
from .models import YouthProfile, Education, Certification, Skill, YouthSkill, TrainingProgram, YouthTraining
from .validators import validate_district_value, validate_date_order


class YouthProfileSerializer(serializers.ModelSerializer):
    district = serializers.CharField(required=False, allow_null=True, allow_blank=True)

    class Meta:
        model = YouthProfile
        fields = '__all__'
        read_only_fields = ['created_at', 'updated_at']
        # Duplicate participant codes are reported as 409 by the views
        extra_kwargs = {'participant_code': {'validators': []}}

    def validate_district(self, value):
        return validate_district_value(value)

    def validate(self, attrs):
        has_name = any(
            attrs.get(field) or (self.instance and getattr(self.instance, field))
            for field in ('full_name', 'first_name', 'last_name')
        )
        if not has_name:
            raise serializers.ValidationError({'full_name': 'A name is required (full name or first/last name)'})
        return attrs


class YouthProfileListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list views"""
    class Meta:
        model = YouthProfile
        fields = ['id', 'participant_code', 'full_name', 'gender', 'district', 'town', 'phone_number',
                  'dare_model', 'program_status', 'cohort', 'is_deleted', 'created_at']


class EducationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Education
        fields = ['id', 'youth', 'qualification_type', 'qualification_name', 'specialization',
                  'level_completed', 'institution', 'graduation_year', 'is_highest_qualification',
                  'certificate_url', 'qualification_status', 'additional_details', 'created_at', 'updated_at']
        read_only_fields = ['created_at', 'updated_at']


class EducationBatchItemSerializer(EducationSerializer):
    """Education record inside a batch replace; the youth comes from the URL"""
    class Meta(EducationSerializer.Meta):
        read_only_fields = ['youth', 'created_at', 'updated_at']


class CertificationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Certification
        fields = ['id', 'youth', 'certification_name', 'issuing_organization', 'issue_date',
                  'expiry_date', 'credential_id', 'credential_url', 'created_at', 'updated_at']
        read_only_fields = ['created_at', 'updated_at']

    def validate(self, attrs):
        issue_date = attrs.get('issue_date', getattr(self.instance, 'issue_date', None))
        expiry_date = attrs.get('expiry_date', getattr(self.instance, 'expiry_date', None))
        errors = validate_date_order(issue_date, expiry_date, 'issue_date', 'expiry_date')
        if errors:
            raise serializers.ValidationError(errors)
        return attrs


class SkillSerializer(serializers.ModelSerializer):
    class Meta:
        model = Skill
        fields = ['id', 'name', 'description', 'is_active', 'created_at', 'updated_at']


class YouthSkillSerializer(serializers.ModelSerializer):
    skill_name = serializers.CharField(source='skill.name', read_only=True)

    class Meta:
        model = YouthSkill
        fields = ['id', 'youth', 'skill', 'skill_name', 'proficiency', 'is_primary',
                  'years_of_experience', 'notes', 'created_at', 'updated_at']
        read_only_fields = ['youth', 'created_at', 'updated_at']


class TrainingProgramSerializer(serializers.ModelSerializer):
    enrolment_count = serializers.IntegerField(source='enrolments.count', read_only=True)

    class Meta:
        model = TrainingProgram
        fields = ['id', 'name', 'description', 'category', 'total_modules', 'enrolment_count',
                  'created_at', 'updated_at']


class YouthTrainingSerializer(serializers.ModelSerializer):
    program_name = serializers.CharField(source='program.name', read_only=True)
    youth_name = serializers.CharField(source='youth.full_name', read_only=True)

    class Meta:
        model = YouthTraining
        fields = ['id', 'youth', 'youth_name', 'program', 'program_name', 'start_date',
                  'completion_date', 'status', 'certification_received', 'notes', 'created_at', 'updated_at']
        read_only_fields = ['created_at', 'updated_at']

    def validate(self, attrs):
        start = attrs.get('start_date', getattr(self.instance, 'start_date', None))
        end = attrs.get('completion_date', getattr(self.instance, 'completion_date', None))
        errors = validate_date_order(start, end, 'start_date', 'completion_date')
        if errors:
            raise serializers.ValidationError(errors)
        return attrs


class YouthProfileDetailSerializer(YouthProfileSerializer):
    """Profile with its education, certifications, skills, training and businesses"""
    education = EducationSerializer(many=True, read_only=True)
    certifications = CertificationSerializer(many=True, read_only=True)
    youth_skills = YouthSkillSerializer(many=True, read_only=True)
    training = YouthTrainingSerializer(many=True, read_only=True)
    businesses = serializers.SerializerMethodField()

    def get_businesses(self, obj):
        return [
            {
                'id': rel.business_id,
                'business_name': rel.business.business_name,
                'role': rel.role,
                'join_date': rel.join_date,
                'is_active': rel.is_active,
            }
            for rel in obj.business_relationships.select_related('business')
        ]
