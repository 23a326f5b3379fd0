import logging

from django.db import transaction
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from backend.access.permissions import HasResourceAccess, HasResourcePermission
from backend.businesses.models import BusinessProfile
from backend.core.cache_utils import invalidate_dashboard_cache
from backend.core.utils import create_audit_log
from .models import Mentor, MentorBusinessRelationship, MentorshipMessage, BusinessAdvice
from .serializers import (
    MentorSerializer, MentorBusinessRelationshipSerializer, MentorBusinessDetailedSerializer,
    MentorshipMessageSerializer, BusinessAdviceSerializer
)

logger = logging.getLogger('backend.mentors')


# Mentor views
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('mentors')])
def mentor_list_create(request):
    if request.method == 'GET':
        mentors = Mentor.objects.select_related('user')
        if request.query_params.get('active') == 'true':
            mentors = mentors.filter(is_active=True)
        district = request.query_params.get('district')
        if district:
            mentors = mentors.filter(assigned_district=district)
        return Response(MentorSerializer(mentors, many=True).data)

    serializer = MentorSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    mentor = serializer.save()
    logger.info(f"Mentor created: {mentor.id} ({mentor.name}) by {request.user.username}")
    create_audit_log(request, 'create', 'Mentor', mentor.id, object_name=mentor.name)
    invalidate_dashboard_cache()
    return Response(MentorSerializer(mentor).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess('mentors')])
def mentor_detail(request, pk):
    """
    Retrieve, update or remove a mentor.

    A mentor with assignments, messages or advice is deactivated (along with
    its assignments) instead of deleted; the response says which happened.
    Pass ?force=true to delete the mentor and everything attached to it.
    """
    mentor = get_object_or_404(Mentor, pk=pk)

    if request.method == 'GET':
        return Response(MentorSerializer(mentor).data)

    if request.method in ('PUT', 'PATCH'):
        serializer = MentorSerializer(mentor, data=request.data, partial=request.method == 'PATCH')
        if serializer.is_valid():
            serializer.save()
            create_audit_log(request, 'update', 'Mentor', mentor.id, changes=request.data, object_name=mentor.name)
            return Response(serializer.data)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    # DELETE
    force = request.query_params.get('force') == 'true'
    name = mentor.name
    try:
        with transaction.atomic():
            if mentor.has_history() and not force:
                mentor.is_active = False
                mentor.save(update_fields=['is_active', 'updated_at'])
                closed = mentor.business_relationships.filter(is_active=True).update(is_active=False)
                outcome = 'deactivated'
            else:
                mentor.delete()
                closed = 0
                outcome = 'deleted'
    except Exception as e:
        logger.error(f"Failed to remove mentor {pk}: {str(e)}", exc_info=True)
        return Response({'error': 'Failed to remove mentor', 'details': str(e)},
                        status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    invalidate_dashboard_cache()
    if outcome == 'deactivated':
        logger.info(f"Mentor {pk} ({name}) deactivated, {closed} assignments closed, by {request.user.username}")
        create_audit_log(request, 'deactivate', 'Mentor', pk, changes={'closed_assignments': closed}, object_name=name)
        mentor.refresh_from_db()
        return Response({
            'message': f"Mentor '{name}' has assignment history and was deactivated",
            'outcome': outcome,
            'closed_assignments': closed,
            'mentor': MentorSerializer(mentor).data,
        })

    logger.info(f"Mentor {pk} ({name}) deleted by {request.user.username}")
    create_audit_log(request, 'delete', 'Mentor', pk, object_name=name)
    return Response(status=status.HTTP_204_NO_CONTENT)


# Mentor-business assignment views
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('mentor_assignments')])
def assignment_list_create(request):
    """List assignments or assign a mentor to a business"""
    if request.method == 'GET':
        assignments = MentorBusinessRelationship.objects.all()
        if request.query_params.get('active') == 'true':
            assignments = assignments.filter(is_active=True)
        return Response(MentorBusinessRelationshipSerializer(assignments, many=True).data)

    serializer = MentorBusinessRelationshipSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    mentor = serializer.validated_data['mentor']
    business = serializer.validated_data['business']
    if MentorBusinessRelationship.objects.filter(mentor=mentor, business=business).exists():
        return Response({'error': f"{mentor.name} is already assigned to {business.business_name}"},
                        status=status.HTTP_409_CONFLICT)
    if not mentor.is_active:
        return Response({'error': 'Cannot assign an inactive mentor'}, status=status.HTTP_400_BAD_REQUEST)

    assignment = serializer.save()
    logger.info(f"Mentor {mentor.id} assigned to business {business.id} by {request.user.username}")
    create_audit_log(request, 'assign', 'MentorBusinessRelationship', assignment.id,
                     object_name=f"{mentor.name} -> {business.business_name}")
    invalidate_dashboard_cache()
    return Response(MentorBusinessDetailedSerializer(assignment).data, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourceAccess('mentor_assignments')])
def assignment_detailed_list(request):
    """Assignments with mentor and business details"""
    assignments = MentorBusinessRelationship.objects.select_related('mentor', 'business')
    if request.query_params.get('active') == 'true':
        assignments = assignments.filter(is_active=True)
    return Response(MentorBusinessDetailedSerializer(assignments, many=True).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourceAccess('mentor_assignments')])
def assignments_by_mentor(request, mentor_id):
    mentor = get_object_or_404(Mentor, pk=mentor_id)
    assignments = mentor.business_relationships.select_related('business')
    return Response(MentorBusinessDetailedSerializer(assignments, many=True).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourceAccess('mentor_assignments')])
def assignments_by_business(request, business_id):
    business = get_object_or_404(BusinessProfile, pk=business_id)
    assignments = business.mentor_relationships.select_related('mentor')
    return Response(MentorBusinessDetailedSerializer(assignments, many=True).data)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess('mentor_assignments')])
def assignment_detail(request, pk):
    assignment = get_object_or_404(MentorBusinessRelationship, pk=pk)

    if request.method == 'GET':
        return Response(MentorBusinessDetailedSerializer(assignment).data)
    elif request.method in ('PUT', 'PATCH'):
        serializer = MentorBusinessRelationshipSerializer(
            assignment, data=request.data, partial=request.method == 'PATCH'
        )
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
        mentor = serializer.validated_data.get('mentor', assignment.mentor)
        business = serializer.validated_data.get('business', assignment.business)
        if MentorBusinessRelationship.objects.filter(mentor=mentor, business=business).exclude(pk=pk).exists():
            return Response({'error': 'This mentor is already assigned to that business'},
                            status=status.HTTP_409_CONFLICT)
        serializer.save()
        create_audit_log(request, 'update', 'MentorBusinessRelationship', pk, changes=request.data)
        return Response(MentorBusinessDetailedSerializer(assignment).data)
    else:  # DELETE
        assignment.delete()
        create_audit_log(request, 'unassign', 'MentorBusinessRelationship', pk)
        invalidate_dashboard_cache()
        return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['DELETE'])
@permission_classes([IsAuthenticated, HasResourcePermission('mentor_assignments', 'delete')])
def assignment_delete_pair(request, mentor_id, business_id):
    """Remove the assignment of a mentor to a business"""
    deleted, _ = MentorBusinessRelationship.objects.filter(mentor_id=mentor_id, business_id=business_id).delete()
    if not deleted:
        return Response({'error': 'Mentor is not assigned to this business'}, status=status.HTTP_404_NOT_FOUND)
    logger.info(f"Mentor {mentor_id} unassigned from business {business_id} by {request.user.username}")
    create_audit_log(request, 'unassign', 'MentorBusinessRelationship', f"{mentor_id}:{business_id}")
    invalidate_dashboard_cache()
    return Response(status=status.HTTP_204_NO_CONTENT)


# Messages and advice
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('mentorship_messages')])
def message_list_create(request):
    """Conversation between a mentor and a business"""
    if request.method == 'GET':
        messages = MentorshipMessage.objects.all()
        business_id = request.query_params.get('business')
        mentor_id = request.query_params.get('mentor')
        if business_id:
            messages = messages.filter(business_id=business_id)
        if mentor_id:
            messages = messages.filter(mentor_id=mentor_id)
        return Response(MentorshipMessageSerializer(messages, many=True).data)

    serializer = MentorshipMessageSerializer(data=request.data)
    if serializer.is_valid():
        serializer.save()
        return Response(serializer.data, status=status.HTTP_201_CREATED)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['POST'])
@permission_classes([IsAuthenticated, HasResourcePermission('mentorship_messages', 'view')])
def message_mark_read(request, pk):
    message = get_object_or_404(MentorshipMessage, pk=pk)
    if not message.is_read:
        message.is_read = True
        message.save(update_fields=['is_read'])
    return Response(MentorshipMessageSerializer(message).data)


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('business_advice')])
def advice_list_create(request):
    if request.method == 'GET':
        advice = BusinessAdvice.objects.select_related('mentor')
        business_id = request.query_params.get('business')
        mentor_id = request.query_params.get('mentor')
        if business_id:
            advice = advice.filter(business_id=business_id)
        if mentor_id:
            advice = advice.filter(mentor_id=mentor_id)
        return Response(BusinessAdviceSerializer(advice, many=True).data)

    serializer = BusinessAdviceSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    advice = serializer.save(created_by=request.user)
    create_audit_log(request, 'create', 'BusinessAdvice', advice.id)
    return Response(BusinessAdviceSerializer(advice).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess('business_advice')])
def advice_detail(request, pk):
    advice = get_object_or_404(BusinessAdvice, pk=pk)

    if request.method == 'GET':
        return Response(BusinessAdviceSerializer(advice).data)
    elif request.method == 'PATCH':
        serializer = BusinessAdviceSerializer(advice, data=request.data, partial=True)
        if serializer.is_valid():
            serializer.save(updated_by=request.user)
            return Response(serializer.data)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    else:  # DELETE
        advice.delete()
        create_audit_log(request, 'delete', 'BusinessAdvice', pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
