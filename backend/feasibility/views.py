import logging

from django.shortcuts import get_object_or_404
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from backend.access.permissions import HasResourceAccess, HasResourcePermission, RoleRequired
from backend.businesses.models import BusinessProfile
from backend.core.utils import create_audit_log
from .models import FeasibilityAssessment
from .serializers import FeasibilityAssessmentSerializer, FeasibilityReviewSerializer, REVIEW_FIELDS

logger = logging.getLogger('backend.feasibility')


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('feasibility_assessment')])
def assessment_list_create(request):
    """List assessments or start a new one"""
    if request.method == 'GET':
        assessments = FeasibilityAssessment.objects.select_related('business', 'youth')
        status_filter = request.query_params.get('status')
        youth_id = request.query_params.get('youth')
        if status_filter:
            assessments = assessments.filter(status=status_filter)
        if youth_id:
            assessments = assessments.filter(youth_id=youth_id)
        return Response(FeasibilityAssessmentSerializer(assessments, many=True).data)

    serializer = FeasibilityAssessmentSerializer(data=request.data)
    if not serializer.is_valid():
        # Missing business or youth is a 404, not a validation error
        for field, label in (('business', 'Business'), ('youth', 'Youth profile')):
            codes = [getattr(error, 'code', None) for error in serializer.errors.get(field, [])]
            if 'does_not_exist' in codes:
                return Response({'error': f"{label} not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    assessment = serializer.save(assessment_by=request.user)
    logger.info(f"Feasibility assessment {assessment.id} created for business {assessment.business_id} by {request.user.username}")
    create_audit_log(request, 'create', 'FeasibilityAssessment', assessment.id, object_name=str(assessment))
    return Response(FeasibilityAssessmentSerializer(assessment).data, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourceAccess('feasibility_assessment')])
def assessments_by_business(request, business_id):
    business = get_object_or_404(BusinessProfile, pk=business_id)
    assessments = business.feasibility_assessments.select_related('youth')
    return Response(FeasibilityAssessmentSerializer(assessments, many=True).data)


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess('feasibility_assessment')])
def assessment_detail(request, pk):
    assessment = get_object_or_404(FeasibilityAssessment, pk=pk)

    if request.method == 'GET':
        return Response(FeasibilityAssessmentSerializer(assessment).data)
    elif request.method == 'PATCH':
        if assessment.status == 'Reviewed':
            return Response({'error': 'Reviewed assessments cannot be edited'}, status=status.HTTP_400_BAD_REQUEST)
        serializer = FeasibilityAssessmentSerializer(assessment, data=request.data, partial=True)
        if serializer.is_valid():
            serializer.save()
            create_audit_log(request, 'update', 'FeasibilityAssessment', pk, changes=request.data)
            return Response(serializer.data)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    else:  # DELETE
        assessment.delete()
        create_audit_log(request, 'delete', 'FeasibilityAssessment', pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['POST'])
@permission_classes([IsAuthenticated, HasResourcePermission('feasibility_assessment', 'update')])
def assessment_submit(request, pk):
    """Mark an assessment as completed and ready for review"""
    assessment = get_object_or_404(FeasibilityAssessment, pk=pk)
    if assessment.status == 'Reviewed':
        return Response({'error': 'Assessment has already been reviewed'}, status=status.HTTP_400_BAD_REQUEST)

    assessment.status = 'Completed'
    assessment.save(update_fields=['status', 'updated_at'])
    logger.info(f"Feasibility assessment {pk} submitted by {request.user.username}")
    create_audit_log(request, 'submit', 'FeasibilityAssessment', pk, object_name=str(assessment))
    return Response(FeasibilityAssessmentSerializer(assessment).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated, RoleRequired('admin', 'reviewer')])
def assessment_review(request, pk):
    """Record a reviewer's verdict on a submitted assessment"""
    assessment = get_object_or_404(FeasibilityAssessment, pk=pk)
    if assessment.status not in ('Completed', 'Reviewed'):
        return Response({'error': 'Only submitted assessments can be reviewed'}, status=status.HTTP_400_BAD_REQUEST)

    serializer = FeasibilityReviewSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    data = serializer.validated_data
    for field in REVIEW_FIELDS:
        setattr(assessment, field, data.get(field, ''))
    if 'overall_feasibility_percentage' in data:
        assessment.overall_feasibility_percentage = data['overall_feasibility_percentage']
    assessment.status = 'Reviewed'
    assessment.reviewed_by = request.user
    assessment.review_date = timezone.now()
    assessment.save()

    logger.info(f"Feasibility assessment {pk} reviewed by {request.user.username}")
    create_audit_log(request, 'review', 'FeasibilityAssessment', pk, changes={k: str(v) for k, v in data.items()})
    return Response(FeasibilityAssessmentSerializer(assessment).data)
