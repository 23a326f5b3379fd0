import logging

from django.db import IntegrityError, transaction
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from backend.access.permissions import HasResourceAccess
from backend.core.utils import create_audit_log
from .models import Makerspace, BusinessMakerspaceAssignment
from .serializers import MakerspaceSerializer, BusinessMakerspaceAssignmentSerializer

logger = logging.getLogger('backend.makerspaces')


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('makerspaces')])
def makerspace_list_create(request):
    if request.method == 'GET':
        makerspaces = Makerspace.objects.all()
        district = request.query_params.get('district')
        status_filter = request.query_params.get('status')
        if district:
            makerspaces = makerspaces.filter(district=district)
        if status_filter:
            makerspaces = makerspaces.filter(status=status_filter)
        return Response(MakerspaceSerializer(makerspaces, many=True).data)

    serializer = MakerspaceSerializer(data=request.data)
    if serializer.is_valid():
        makerspace = serializer.save()
        logger.info(f"Makerspace '{makerspace.name}' created by {request.user.username}")
        create_audit_log(request, 'create', 'Makerspace', makerspace.id, object_name=makerspace.name)
        return Response(serializer.data, status=status.HTTP_201_CREATED)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess('makerspaces')])
def makerspace_detail(request, pk):
    makerspace = get_object_or_404(Makerspace, pk=pk)

    if request.method == 'GET':
        return Response(MakerspaceSerializer(makerspace).data)
    elif request.method in ['PUT', 'PATCH']:
        serializer = MakerspaceSerializer(makerspace, data=request.data, partial=request.method == 'PATCH')
        if serializer.is_valid():
            serializer.save()
            create_audit_log(request, 'update', 'Makerspace', pk, changes=request.data, object_name=makerspace.name)
            return Response(serializer.data)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    else:  # DELETE
        name = makerspace.name
        makerspace.delete()
        logger.info(f"Makerspace '{name}' deleted by {request.user.username}")
        create_audit_log(request, 'delete', 'Makerspace', pk, object_name=name)
        return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('business_makerspace')])
def makerspace_businesses(request, pk):
    """Businesses assigned to a makerspace, or assign one"""
    makerspace = get_object_or_404(Makerspace, pk=pk)

    if request.method == 'GET':
        assignments = makerspace.business_assignments.select_related('business')
        if request.query_params.get('active') == 'true':
            assignments = assignments.filter(is_active=True)
        return Response(BusinessMakerspaceAssignmentSerializer(assignments, many=True).data)

    serializer = BusinessMakerspaceAssignmentSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    try:
        with transaction.atomic():
            assignment = serializer.save(makerspace=makerspace, assigned_by=request.user)
    except IntegrityError:
        return Response({'error': 'Business is already assigned to this makerspace'}, status=status.HTTP_409_CONFLICT)

    logger.info(f"Business {assignment.business_id} assigned to makerspace {pk} by {request.user.username}")
    create_audit_log(request, 'assign', 'BusinessMakerspaceAssignment', assignment.id, object_name=str(assignment))
    return Response(BusinessMakerspaceAssignmentSerializer(assignment).data, status=status.HTTP_201_CREATED)


@api_view(['DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess('business_makerspace')])
def assignment_delete(request, pk):
    assignment = get_object_or_404(BusinessMakerspaceAssignment, pk=pk)
    label = str(assignment)
    assignment.delete()
    create_audit_log(request, 'unassign', 'BusinessMakerspaceAssignment', pk, object_name=label)
    return Response(status=status.HTTP_204_NO_CONTENT)
