from rest_framework import serializers
from .models import FeasibilityAssessment

REVIEW_FIELDS = ['review_comments', 'recommendations', 'risk_factors', 'growth_opportunities', 'recommended_actions']


class FeasibilityAssessmentSerializer(serializers.ModelSerializer):
    business_name = serializers.CharField(source='business.business_name', read_only=True)
    youth_name = serializers.CharField(source='youth.full_name', read_only=True)
    total_startup_cost = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    total_contribution = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)

    class Meta:
        model = FeasibilityAssessment
        fields = '__all__'
        read_only_fields = ['assessment_by', 'reviewed_by', 'review_date', 'created_at', 'updated_at']

    def validate_status(self, value):
        # Reviewed is only reachable through the review endpoint
        if value == 'Reviewed' and (self.instance is None or self.instance.status != 'Reviewed'):
            raise serializers.ValidationError("Use the review endpoint to mark an assessment as reviewed")
        return value


class FeasibilityReviewSerializer(serializers.Serializer):
    review_comments = serializers.CharField(allow_blank=True, required=False, default='')
    recommendations = serializers.CharField(allow_blank=True, required=False, default='')
    risk_factors = serializers.CharField(allow_blank=True, required=False, default='')
    growth_opportunities = serializers.CharField(allow_blank=True, required=False, default='')
    recommended_actions = serializers.CharField(allow_blank=True, required=False, default='')
    overall_feasibility_percentage = serializers.DecimalField(
        max_digits=5, decimal_places=2, min_value=0, max_value=100, required=False
    )
