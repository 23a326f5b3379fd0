import logging

from django.contrib.auth import get_user_model
from django.core.cache import cache
from django.core.exceptions import ObjectDoesNotExist
from django.db import transaction
from django.db.models import Count, ProtectedError, Q
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import AuthenticationFailed, InvalidToken, TokenError
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer, TokenRefreshSerializer
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from backend.access.permissions import HasResourceAccess, HasResourcePermission, RoleRequired, get_role_permission_set
from backend.access.registry import all_pairs
from backend.businesses.models import BusinessProfile
from backend.mentors.models import Mentor, MentorBusinessRelationship
from backend.youth.models import YouthProfile, YouthTraining
from . import maintenance
from .cache_utils import DASHBOARD_STATS_CACHE_TTL, DASHBOARD_STATS_KEY
from .models import Setting, AuditLog
from .serializers import UserSerializer, UserCreateSerializer, SettingSerializer, AuditLogSerializer
from .utils import create_audit_log

logger = logging.getLogger('backend.core')

User = get_user_model()


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    def validate(self, attrs):
        data = super().validate(attrs)
        # Ensure user is active
        if not self.user.is_active:
            raise AuthenticationFailed('User account is disabled.')
        data['user'] = UserSerializer(self.user).data
        return data

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token['username'] = user.username
        token['role'] = user.role
        token['full_name'] = user.full_name
        return token


class CustomTokenObtainPairView(TokenObtainPairView):
    serializer_class = CustomTokenObtainPairSerializer


class CustomTokenRefreshSerializer(TokenRefreshSerializer):
    """Custom token refresh serializer that handles deleted users gracefully"""
    def validate(self, attrs):
        try:
            return super().validate(attrs)
        except (InvalidToken, TokenError):
            raise InvalidToken('Token is invalid or expired.')
        except (ObjectDoesNotExist, User.DoesNotExist):
            # User referenced in token doesn't exist anymore
            raise InvalidToken('Token is invalid. User no longer exists.')


class CustomTokenRefreshView(TokenRefreshView):
    """Custom token refresh view that handles deleted users gracefully"""
    serializer_class = CustomTokenRefreshSerializer


def _permission_list(user):
    if user.is_superuser or user.role == 'admin':
        pairs = all_pairs()
    else:
        pairs = sorted(get_role_permission_set(user.role) or [])
    return [{'resource': resource, 'action': action} for resource, action in pairs]


@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """User registration endpoint; new accounts always start as mentees"""
    data = request.data.copy()
    data.pop('role', None)
    serializer = UserCreateSerializer(data=data)
    if serializer.is_valid():
        user = serializer.save()
        logger.info(f"User registered: {user.username}")
        # Generate tokens for the new user
        token = CustomTokenObtainPairSerializer.get_token(user)
        return Response({
            'user': UserSerializer(user).data,
            'access': str(token.access_token),
            'refresh': str(token),
        }, status=status.HTTP_201_CREATED)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def user_me(request):
    """Current user with the permissions granted to their role"""
    user_data = UserSerializer(request.user).data
    user_data['permissions'] = _permission_list(request.user)
    return Response(user_data)


# User views
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('users')])
def user_list_create(request):
    """List all users or create a new user"""
    if request.method == 'GET':
        users = User.objects.all().order_by('username')
        role = request.query_params.get('role')
        if role:
            users = users.filter(role=role)
        return Response(UserSerializer(users, many=True).data)

    serializer = UserCreateSerializer(data=request.data)
    if serializer.is_valid():
        user = serializer.save()
        logger.info(f"User {user.username} created by {request.user.username}")
        create_audit_log(request, 'create', 'User', user.id, object_name=user.username)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess('users')])
def user_detail(request, pk):
    """Retrieve, update or delete a user"""
    user = get_object_or_404(User, pk=pk)

    if request.method == 'GET':
        return Response(UserSerializer(user).data)
    elif request.method in ['PUT', 'PATCH']:
        serializer = UserSerializer(user, data=request.data, partial=request.method == 'PATCH')
        if serializer.is_valid():
            serializer.save()
            create_audit_log(request, 'update', 'User', pk, changes=request.data, object_name=user.username)
            return Response(serializer.data)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    else:  # DELETE
        if user.pk == request.user.pk:
            return Response({'error': 'You cannot delete your own account'}, status=status.HTTP_400_BAD_REQUEST)
        mentor = Mentor.objects.filter(user=user).first()
        if mentor and mentor.has_history():
            logger.warning(f"Refused to delete user {user.username}: mentor profile has history")
            return Response({'error': 'User has a mentor profile with mentorship history; deactivate the mentor instead'},
                            status=status.HTTP_409_CONFLICT)
        username = user.username
        try:
            with transaction.atomic():
                user.delete()
        except ProtectedError:
            logger.warning(f"Refused to delete user {username}: referenced by business tracking")
            return Response({'error': 'User has recorded business tracking and cannot be deleted; deactivate the account instead'},
                            status=status.HTTP_409_CONFLICT)
        logger.info(f"User {username} deleted by {request.user.username}")
        create_audit_log(request, 'delete', 'User', pk, object_name=username)
        return Response(status=status.HTTP_204_NO_CONTENT)


# Setting views
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('system_settings', {'POST': 'manage'})])
def setting_list_create(request):
    """List all settings or create a new setting"""
    if request.method == 'GET':
        return Response(SettingSerializer(Setting.objects.order_by('key'), many=True).data)

    serializer = SettingSerializer(data=request.data)
    if serializer.is_valid():
        setting = serializer.save()
        create_audit_log(request, 'create', 'Setting', setting.id, object_name=setting.key)
        return Response(serializer.data, status=status.HTTP_201_CREATED)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess(
    'system_settings', {'PUT': 'manage', 'PATCH': 'manage', 'DELETE': 'manage'})])
def setting_detail(request, pk):
    """Retrieve, update or delete a setting"""
    setting = get_object_or_404(Setting, pk=pk)

    if request.method == 'GET':
        return Response(SettingSerializer(setting).data)
    elif request.method in ['PUT', 'PATCH']:
        serializer = SettingSerializer(setting, data=request.data, partial=request.method == 'PATCH')
        if serializer.is_valid():
            serializer.save()
            create_audit_log(request, 'update', 'Setting', pk, changes=request.data, object_name=setting.key)
            return Response(serializer.data)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    else:  # DELETE
        key = setting.key
        setting.delete()
        create_audit_log(request, 'delete', 'Setting', pk, object_name=key)
        return Response(status=status.HTTP_204_NO_CONTENT)


# Activity log views (read-only)
@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourcePermission('activities', 'view')])
def activity_list(request):
    """List activity log entries with filtering"""
    queryset = AuditLog.objects.select_related('user')

    action_filter = request.query_params.get('action')
    if action_filter:
        queryset = queryset.filter(action=action_filter)

    model_filter = request.query_params.get('model')
    if model_filter:
        queryset = queryset.filter(model_name=model_filter)

    user_filter = request.query_params.get('user')
    if user_filter:
        queryset = queryset.filter(user_id=user_filter)

    date_from = request.query_params.get('date_from')
    date_to = request.query_params.get('date_to')
    if date_from:
        queryset = queryset.filter(created_at__date__gte=date_from)
    if date_to:
        queryset = queryset.filter(created_at__date__lte=date_to)

    try:
        limit = int(request.query_params.get('limit', 100))
    except ValueError:
        limit = 100

    queryset = queryset.order_by('-created_at')[:limit]
    return Response(AuditLogSerializer(queryset, many=True).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourcePermission('activities', 'view')])
def activity_detail(request, pk):
    audit_log = get_object_or_404(AuditLog, pk=pk)
    return Response(AuditLogSerializer(audit_log).data)


def _compute_dashboard_stats():
    youth = YouthProfile.objects.filter(is_deleted=False)
    return {
        'total_youth': youth.count(),
        'total_businesses': BusinessProfile.objects.count(),
        'total_mentors': Mentor.objects.filter(is_active=True).count(),
        'active_mentorships': MentorBusinessRelationship.objects.filter(is_active=True).count(),
        'training_enrolments': YouthTraining.objects.count(),
        'youth_by_district': {
            row['district'] or 'Unknown': row['count']
            for row in youth.values('district').annotate(count=Count('id')).order_by('district')
        },
        'youth_by_dare_model': {
            row['dare_model'] or 'Unknown': row['count']
            for row in youth.values('dare_model').annotate(count=Count('id')).order_by('dare_model')
        },
    }


@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourcePermission('dashboard', 'view')])
def dashboard_stats(request):
    """Headline counters; cached until youth, business or mentor data changes"""
    stats = cache.get(DASHBOARD_STATS_KEY)
    if stats is None:
        stats = _compute_dashboard_stats()
        cache.set(DASHBOARD_STATS_KEY, stats, DASHBOARD_STATS_CACHE_TTL)
        logger.debug("Dashboard stats recomputed")
    return Response(stats)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def global_search(request):
    """Search youth, businesses and mentors by name and contact fields"""
    query = request.query_params.get('q', '').strip()

    if not query:
        return Response({'youth': [], 'businesses': [], 'mentors': []})

    youth = YouthProfile.objects.filter(is_deleted=False).filter(
        Q(full_name__icontains=query) |
        Q(participant_code__icontains=query) |
        Q(phone_number__icontains=query) |
        Q(email__icontains=query)
    )[:20]

    businesses = BusinessProfile.objects.filter(
        Q(business_name__icontains=query) |
        Q(business_location__icontains=query) |
        Q(business_description__icontains=query)
    )[:20]

    mentors = Mentor.objects.filter(
        Q(name__icontains=query) |
        Q(email__icontains=query) |
        Q(phone__icontains=query)
    )[:20]

    return Response({
        'youth': [
            {'id': y.id, 'full_name': y.full_name, 'participant_code': y.participant_code, 'district': y.district}
            for y in youth
        ],
        'businesses': [
            {'id': b.id, 'business_name': b.business_name, 'district': b.district}
            for b in businesses
        ],
        'mentors': [
            {'id': m.id, 'name': m.name, 'email': m.email, 'assigned_district': m.assigned_district}
            for m in mentors
        ],
    })


@api_view(['POST'])
@permission_classes([IsAuthenticated, RoleRequired('admin')])
def clear_youth_data(request):
    """Remove all youth profiles and the data that depends on them"""
    if request.data.get('confirm') is not True:
        return Response({'error': 'Pass "confirm": true to clear youth data'}, status=status.HTTP_400_BAD_REQUEST)

    try:
        deleted = maintenance.clear_youth_data()
    except Exception as e:
        logger.error(f"Clearing youth data failed: {str(e)}", exc_info=True)
        return Response({'error': 'Failed to clear youth data', 'details': str(e)},
                        status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    create_audit_log(request, 'clear_data', 'YouthProfile', 'all', changes=deleted)
    return Response({'success': True, 'deleted': deleted})
