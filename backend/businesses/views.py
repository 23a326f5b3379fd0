import logging

from django.db import IntegrityError, transaction
from django.shortcuts import get_object_or_404
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from backend.access.permissions import HasResourceAccess, HasResourcePermission, RoleRequired
from backend.core.cache_utils import invalidate_dashboard_cache
from backend.core.utils import create_audit_log
from backend.youth.models import YouthProfile
from .filters import BusinessProfileFilter, BusinessTrackingFilter
from .models import (
    BusinessProfile, BusinessYouthRelationship, BusinessTracking, BusinessTrackingAttachment,
    BusinessResource, BusinessResourceCost
)
from .serializers import (
    BusinessProfileSerializer, BusinessYouthRelationshipSerializer, BusinessTrackingSerializer,
    BusinessTrackingAttachmentSerializer, BusinessResourceSerializer, BusinessResourceCostSerializer
)
from .stats import business_resource_stats as compute_business_resource_stats, business_tracking_stats

logger = logging.getLogger('backend.businesses')

TrackingRecorder = RoleRequired('admin', 'mentor')


# Business profile views
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('businesses')])
def business_list_create(request):
    """List businesses or create a new one"""
    if request.method == 'GET':
        filterset = BusinessProfileFilter(request.query_params, queryset=BusinessProfile.objects.all())
        if not filterset.is_valid():
            return Response(filterset.errors, status=status.HTTP_400_BAD_REQUEST)
        serializer = BusinessProfileSerializer(filterset.qs.distinct(), many=True)
        return Response(serializer.data)

    serializer = BusinessProfileSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    business = serializer.save()
    logger.info(f"Business created: {business.id} ({business.business_name}) by {request.user.username}")
    create_audit_log(request, 'create', 'BusinessProfile', business.id, object_name=business.business_name)
    invalidate_dashboard_cache()
    return Response(BusinessProfileSerializer(business).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess('businesses')])
def business_detail(request, pk):
    """Retrieve, update or delete a business"""
    business = get_object_or_404(BusinessProfile, pk=pk)

    if request.method == 'GET':
        return Response(BusinessProfileSerializer(business).data)
    elif request.method in ('PUT', 'PATCH'):
        serializer = BusinessProfileSerializer(business, data=request.data, partial=request.method == 'PATCH')
        if serializer.is_valid():
            serializer.save()
            create_audit_log(request, 'update', 'BusinessProfile', business.id,
                             changes=request.data, object_name=business.business_name)
            return Response(serializer.data)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    else:  # DELETE
        name = business.business_name
        business.delete()
        logger.info(f"Business deleted: {pk} ({name}) by {request.user.username}")
        create_audit_log(request, 'delete', 'BusinessProfile', pk, object_name=name)
        invalidate_dashboard_cache()
        return Response(status=status.HTTP_204_NO_CONTENT)


# Business members
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('business_youth')])
def business_members(request, pk):
    """List the youth members of a business or add one"""
    business = get_object_or_404(BusinessProfile, pk=pk)

    if request.method == 'GET':
        relationships = business.youth_relationships.select_related('youth')
        if request.query_params.get('active') == 'true':
            relationships = relationships.filter(is_active=True)
        return Response(BusinessYouthRelationshipSerializer(relationships, many=True).data)

    serializer = BusinessYouthRelationshipSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    youth = serializer.validated_data['youth']
    if BusinessYouthRelationship.objects.filter(business=business, youth=youth).exists():
        return Response({'error': f"{youth.full_name} is already a member of this business"},
                        status=status.HTTP_409_CONFLICT)

    relationship = serializer.save(business=business)
    create_audit_log(request, 'assign', 'BusinessYouthRelationship', relationship.id,
                     changes={'youth': youth.id, 'role': relationship.role}, object_name=business.business_name)
    return Response(BusinessYouthRelationshipSerializer(relationship).data, status=status.HTTP_201_CREATED)


@api_view(['PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess('business_youth')])
def business_member_detail(request, pk, youth_id):
    relationship = get_object_or_404(BusinessYouthRelationship, business_id=pk, youth_id=youth_id)

    if request.method == 'DELETE':
        relationship.delete()
        create_audit_log(request, 'unassign', 'BusinessYouthRelationship', f"{pk}:{youth_id}")
        return Response(status=status.HTTP_204_NO_CONTENT)

    serializer = BusinessYouthRelationshipSerializer(relationship, data=request.data, partial=True)
    if serializer.is_valid():
        serializer.save(youth=relationship.youth)
        return Response(serializer.data)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourceAccess('businesses')])
def youth_businesses(request, youth_id):
    """Businesses a youth belongs to"""
    youth = get_object_or_404(YouthProfile, pk=youth_id)
    relationships = youth.business_relationships.select_related('business')
    return Response(BusinessYouthRelationshipSerializer(relationships, many=True).data)


# Business tracking views
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('business_tracking')])
def tracking_list_create(request):
    """List all tracking records or record a new one (admins and mentors only)"""
    if request.method == 'GET':
        queryset = BusinessTracking.objects.select_related('business', 'recorded_by', 'mentor')
        filterset = BusinessTrackingFilter(request.query_params, queryset=queryset)
        if not filterset.is_valid():
            return Response(filterset.errors, status=status.HTTP_400_BAD_REQUEST)
        return Response(BusinessTrackingSerializer(filterset.qs, many=True).data)

    if not TrackingRecorder().has_permission(request, None):
        logger.warning(f"Tracking record rejected for {request.user.username} (role {request.user.role})")
        return Response({'error': 'Only administrators and mentors can record business tracking'},
                        status=status.HTTP_403_FORBIDDEN)

    serializer = BusinessTrackingSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    record = serializer.save(recorded_by=request.user)
    logger.info(f"Tracking record {record.id} created for business {record.business_id} by {request.user.username}")
    create_audit_log(request, 'create', 'BusinessTracking', record.id, object_name=str(record))
    return Response(BusinessTrackingSerializer(record).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess('business_tracking')])
def tracking_detail(request, pk):
    record = get_object_or_404(BusinessTracking, pk=pk)

    if request.method == 'GET':
        return Response(BusinessTrackingSerializer(record).data)
    elif request.method == 'PATCH':
        serializer = BusinessTrackingSerializer(record, data=request.data, partial=True)
        if serializer.is_valid():
            serializer.save()
            create_audit_log(request, 'update', 'BusinessTracking', record.id, changes=request.data)
            return Response(serializer.data)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    else:  # DELETE
        record.delete()
        create_audit_log(request, 'delete', 'BusinessTracking', pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['POST'])
@permission_classes([IsAuthenticated, HasResourcePermission('business_tracking', 'update')])
def tracking_verify(request, pk):
    """Mark a tracking record as verified by the current user"""
    record = get_object_or_404(BusinessTracking, pk=pk)
    record.is_verified = True
    record.verified_by = request.user
    record.verification_date = timezone.now()
    record.save(update_fields=['is_verified', 'verified_by', 'verification_date', 'updated_at'])
    logger.info(f"Tracking record {pk} verified by {request.user.username}")
    create_audit_log(request, 'verify', 'BusinessTracking', pk, object_name=str(record))
    return Response(BusinessTrackingSerializer(record).data)


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('business_tracking', {'POST': 'update'})])
def tracking_attachments(request, pk):
    record = get_object_or_404(BusinessTracking, pk=pk)

    if request.method == 'GET':
        return Response(BusinessTrackingAttachmentSerializer(record.attachments.all(), many=True).data)

    serializer = BusinessTrackingAttachmentSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    attachment = serializer.save(tracking=record, uploaded_by=request.user)
    create_audit_log(request, 'create', 'BusinessTrackingAttachment', attachment.id, object_name=attachment.attachment_name)
    return Response(BusinessTrackingAttachmentSerializer(attachment).data, status=status.HTTP_201_CREATED)


@api_view(['DELETE'])
@permission_classes([IsAuthenticated, HasResourcePermission('business_tracking', 'delete')])
def tracking_attachment_delete(request, pk):
    attachment = get_object_or_404(BusinessTrackingAttachment, pk=pk)
    attachment.delete()
    create_audit_log(request, 'delete', 'BusinessTrackingAttachment', pk)
    return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourceAccess('business_tracking')])
def business_tracking_list(request, pk):
    """Tracking records of one business, newest first"""
    business = get_object_or_404(BusinessProfile, pk=pk)
    records = business.tracking_records.select_related('recorded_by', 'mentor').order_by('-tracking_date', '-id')
    return Response(BusinessTrackingSerializer(records, many=True).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourceAccess('business_tracking')])
def business_stats(request, pk):
    """Latest revenue, head count, growth rate and timelines of a business"""
    business = get_object_or_404(BusinessProfile, pk=pk)
    try:
        return Response(business_tracking_stats(business))
    except Exception as e:
        logger.error(f"Error computing stats for business {pk}: {str(e)}", exc_info=True)
        return Response({'error': 'Failed to compute business statistics', 'details': str(e)},
                        status=status.HTTP_500_INTERNAL_SERVER_ERROR)


# Business resource views
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('business_resources')])
def business_resources(request, pk):
    """List the resources of a business or add one"""
    business = get_object_or_404(BusinessProfile, pk=pk)

    if request.method == 'GET':
        resources = business.resources.prefetch_related('costs').order_by('name')
        return Response(BusinessResourceSerializer(resources, many=True).data)

    serializer = BusinessResourceSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    try:
        with transaction.atomic():
            resource = serializer.save(business=business, created_by=request.user)
    except IntegrityError as e:
        logger.warning(f"Resource rejected for business {pk}: {str(e)}")
        return Response({'error': 'Invalid resource data', 'details': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    create_audit_log(request, 'create', 'BusinessResource', resource.id, object_name=resource.name)
    return Response(BusinessResourceSerializer(resource).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess('business_resources')])
def business_resource_detail(request, pk):
    resource = get_object_or_404(BusinessResource, pk=pk)

    if request.method == 'GET':
        return Response(BusinessResourceSerializer(resource).data)
    elif request.method == 'PATCH':
        serializer = BusinessResourceSerializer(resource, data=request.data, partial=True)
        if serializer.is_valid():
            serializer.save()
            create_audit_log(request, 'update', 'BusinessResource', resource.id,
                             changes=request.data, object_name=resource.name)
            return Response(serializer.data)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    else:  # DELETE
        name = resource.name
        resource.delete()
        create_audit_log(request, 'delete', 'BusinessResource', pk, object_name=name)
        return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourceAccess('business_resources')])
def business_resource_stats(request, pk):
    business = get_object_or_404(BusinessProfile, pk=pk)
    return Response(compute_business_resource_stats(business))


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('business_resources', {'POST': 'update'})])
def resource_costs(request, pk):
    """Cost history of a resource"""
    resource = get_object_or_404(BusinessResource, pk=pk)

    if request.method == 'GET':
        return Response(BusinessResourceCostSerializer(resource.costs.all(), many=True).data)

    serializer = BusinessResourceCostSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    cost = serializer.save(resource=resource, recorded_by=request.user)
    create_audit_log(request, 'create', 'BusinessResourceCost', cost.id,
                     changes={'cost_type': cost.cost_type, 'amount': str(cost.amount)}, object_name=resource.name)
    return Response(BusinessResourceCostSerializer(cost).data, status=status.HTTP_201_CREATED)


@api_view(['DELETE'])
@permission_classes([IsAuthenticated, HasResourcePermission('business_resources', 'delete')])
def resource_cost_delete(request, pk):
    cost = get_object_or_404(BusinessResourceCost, pk=pk)
    cost.delete()
    create_audit_log(request, 'delete', 'BusinessResourceCost', pk)
    return Response(status=status.HTTP_204_NO_CONTENT)
