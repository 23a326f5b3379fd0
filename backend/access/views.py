import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from backend.core.cache_utils import invalidate_role_permissions_cache
from backend.core.utils import create_audit_log, error_response_data
from .models import Role, Permission, RolePermission
from .permissions import HasResourceAccess, HasResourcePermission, get_role_permission_set
from .registry import ACTIONS, ADMIN_ROLE, RESOURCES, all_pairs
from .serializers import (
    RoleSerializer, PermissionSerializer, RolePermissionSerializer,
    PermissionGrantSerializer, BatchPermissionSerializer
)
from . import services

logger = logging.getLogger('backend.access')

User = get_user_model()


# Role views
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('roles')])
def role_list_create(request):
    """List all roles or create a new role"""
    if request.method == 'GET':
        roles = Role.objects.all()
        if request.query_params.get('active') == 'true':
            roles = roles.filter(is_active=True)
        serializer = RoleSerializer(roles, many=True)
        return Response(serializer.data)

    serializer = RoleSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    name = serializer.validated_data['name']
    if Role.objects.filter(name=name).exists():
        logger.warning(f"Role creation rejected, name already exists: {name}")
        return Response({'error': f"Role '{name}' already exists"}, status=status.HTTP_409_CONFLICT)

    try:
        with transaction.atomic():
            role = serializer.save()
    except IntegrityError:
        return Response({'error': f"Role '{name}' already exists"}, status=status.HTTP_409_CONFLICT)

    logger.info(f"Role created: {role.name} by {request.user.username}")
    create_audit_log(request, 'create', 'Role', role.id, changes=serializer.data, object_name=role.name)
    return Response(RoleSerializer(role).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess('roles')])
def role_detail(request, pk):
    """Retrieve, update or delete a role"""
    role = get_object_or_404(Role, pk=pk)

    if request.method == 'GET':
        return Response(RoleSerializer(role).data)

    if request.method == 'DELETE':
        if role.is_system:
            logger.warning(f"Attempt to delete system role {role.name} by {request.user.username}")
            return Response({'error': 'Cannot delete system roles'}, status=status.HTTP_403_FORBIDDEN)
        role_name = role.name
        holders = User.objects.filter(role=role_name).count()
        if holders:
            return Response({'error': f"Role '{role_name}' is still assigned to {holders} user(s)"},
                            status=status.HTTP_409_CONFLICT)
        role.delete()
        invalidate_role_permissions_cache(role_name)
        logger.info(f"Role deleted: {role_name} by {request.user.username}")
        create_audit_log(request, 'delete', 'Role', pk, object_name=role_name)
        return Response(status=status.HTTP_204_NO_CONTENT)

    if not role.is_editable:
        return Response({'error': 'This role cannot be edited'}, status=status.HTTP_403_FORBIDDEN)

    partial = request.method == 'PATCH'
    serializer = RoleSerializer(role, data=request.data, partial=partial)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    new_name = serializer.validated_data.get('name')
    if new_name and new_name != role.name and Role.objects.filter(name=new_name).exists():
        return Response({'error': f"Role '{new_name}' already exists"}, status=status.HTTP_409_CONFLICT)
    if role.is_system and new_name and new_name != role.name:
        return Response({'error': 'Cannot rename system roles'}, status=status.HTTP_403_FORBIDDEN)

    old_name = role.name
    with transaction.atomic():
        serializer.save()
        if role.name != old_name:
            # Users store the role by name
            moved = User.objects.filter(role=old_name).update(role=role.name)
            logger.info(f"Role renamed: {old_name} -> {role.name}, {moved} user(s) moved")
    invalidate_role_permissions_cache(old_name)
    invalidate_role_permissions_cache(role.name)
    create_audit_log(request, 'update', 'Role', role.id, changes=request.data, object_name=role.name)
    return Response(serializer.data)


# Permission views
@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourcePermission('permissions', 'view')])
def permission_list(request):
    """List permissions, optionally filtered by resource"""
    permissions = Permission.objects.all()
    resource = request.query_params.get('resource')
    if resource:
        permissions = permissions.filter(resource=resource)
    return Response(PermissionSerializer(permissions, many=True).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourcePermission('permissions', 'view')])
def resources_actions(request):
    """The static registry of resources and actions"""
    return Response({
        'resources': RESOURCES,
        'actions': ACTIONS,
        'total_possible': len(all_pairs()),
    })


@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourcePermission('permissions', 'view')])
def role_permission_list(request, role_name):
    """List the grants of one role"""
    role = get_object_or_404(Role, name=role_name)
    grants = RolePermission.objects.filter(role=role)
    return Response(RolePermissionSerializer(grants, many=True).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated, HasResourcePermission('permissions', 'manage')])
def role_permission_add(request):
    """Grant a (resource, action) pair to a role"""
    serializer = PermissionGrantSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    data = serializer.validated_data
    role = Role.objects.filter(name=data['role']).first()
    if role is None:
        return Response({'error': f"Role '{data['role']}' not found"}, status=status.HTTP_404_NOT_FOUND)

    if RolePermission.objects.filter(role=role, resource=data['resource'], action=data['action']).exists():
        return Response({'error': 'Permission already exists for this role'}, status=status.HTTP_409_CONFLICT)

    grant = RolePermission.objects.create(role=role, resource=data['resource'], action=data['action'])
    invalidate_role_permissions_cache(role.name)
    create_audit_log(request, 'grant', 'RolePermission', grant.id,
                     changes={'resource': grant.resource, 'action': grant.action}, object_name=role.name)
    return Response(RolePermissionSerializer(grant).data, status=status.HTTP_201_CREATED)


@api_view(['DELETE'])
@permission_classes([IsAuthenticated, HasResourcePermission('permissions', 'manage')])
def role_permission_remove(request):
    """Revoke a (resource, action) pair from a role"""
    serializer = PermissionGrantSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    data = serializer.validated_data
    deleted, _ = RolePermission.objects.filter(
        role__name=data['role'], resource=data['resource'], action=data['action']
    ).delete()
    if not deleted:
        return Response({'error': 'Permission not found for this role'}, status=status.HTTP_404_NOT_FOUND)

    invalidate_role_permissions_cache(data['role'])
    create_audit_log(request, 'revoke', 'RolePermission', f"{data['role']}:{data['resource']}:{data['action']}",
                     changes=dict(data), object_name=data['role'])
    return Response({'message': 'Permission removed'})


@api_view(['PUT'])
@permission_classes([IsAuthenticated, HasResourcePermission('permissions', 'manage')])
def role_permission_batch(request):
    """Apply several grants and revocations to a role at once"""
    serializer = BatchPermissionSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    role = Role.objects.filter(name=serializer.validated_data['role']).first()
    if role is None:
        return Response({'error': 'Role not found'}, status=status.HTTP_404_NOT_FOUND)

    try:
        results = services.apply_permission_changes(role, serializer.validated_data['permissions'])
    except Exception as e:
        logger.error(f"Batch permission update failed for {role.name}: {str(e)}", exc_info=True)
        return Response(error_response_data('Failed to update permissions', e),
                        status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    create_audit_log(request, 'update', 'RolePermission', role.id, changes=results, object_name=role.name)
    return Response({'message': 'Permissions updated', 'role': role.name, 'results': results})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_permissions(request):
    """The current user's effective permissions"""
    user = request.user
    if user.is_superuser or user.role == ADMIN_ROLE:
        pairs = all_pairs()
    else:
        pairs = sorted(get_role_permission_set(user.role) or [])
    return Response({
        'role': user.role,
        'permissions': [{'resource': r, 'action': a} for r, a in pairs],
    })


# Admin permission control
@api_view(['POST'])
@permission_classes([IsAuthenticated, HasResourcePermission('system', 'manage')])
def generate_missing_permissions(request):
    """Create missing permissions and admin grants from the registry"""
    try:
        data = services.generate_missing_permissions()
    except Exception as e:
        logger.error(f"Generating missing permissions failed: {str(e)}", exc_info=True)
        return Response({'success': False, 'message': 'Failed to generate missing permissions', 'details': str(e)},
                        status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response({
        'success': True,
        'message': f"Created {data['created']} missing permission records",
        'data': data,
    })


@api_view(['POST'])
@permission_classes([IsAuthenticated, HasResourcePermission('system', 'manage')])
def reset_permissions(request):
    """Re-grant every permission to the admin role"""
    try:
        data = services.reset_admin_permissions()
    except Exception as e:
        logger.error(f"Resetting admin permissions failed: {str(e)}", exc_info=True)
        return Response({'success': False, 'message': 'Failed to reset permissions', 'details': str(e)},
                        status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    create_audit_log(request, 'update', 'RolePermission', data['admin_role_id'], changes=data, object_name=ADMIN_ROLE)
    return Response({
        'success': True,
        'message': f"Admin role now has {data['granted']} permissions",
        'data': data,
    })

