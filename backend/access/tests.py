"""
Test suite for roles, permissions and role grants
"""
from django.core.management import call_command
from rest_framework import status
from rest_framework.test import APIRequestFactory
from backend.core.test_utils import TestDataFactory, AuthenticatedAPIClient, CacheClearingTestCase
from .models import Permission, Role, RolePermission
from .permissions import HasResourcePermission, check_permission, user_has_permission
from .registry import ACTIONS, RESOURCES, all_pairs
from . import services


class RoleTests(CacheClearingTestCase):
    """Test role CRUD endpoints"""

    def setUp(self):
        super().setUp()
        self.admin = TestDataFactory.create_admin()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.admin)

    def test_create_role(self):
        response = self.client.post('/api/v1/roles/', {'name': 'Field Officer', 'display_name': 'Field Officer'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['name'], 'field officer')

    def test_duplicate_role_name_conflict(self):
        """A second role with the same name is rejected with 409"""
        TestDataFactory.create_role('coordinator')
        response = self.client.post('/api/v1/roles/', {'name': 'Coordinator'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(Role.objects.filter(name='coordinator').count(), 1)

    def test_rename_to_existing_name_conflict(self):
        TestDataFactory.create_role('coordinator')
        other = TestDataFactory.create_role('assistant')
        response = self.client.patch(f'/api/v1/roles/{other.id}/', {'name': 'coordinator'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_cannot_delete_system_role(self):
        role = TestDataFactory.create_role('mentor', is_system=True)
        response = self.client.delete(f'/api/v1/roles/{role.id}/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['error'], 'Cannot delete system roles')
        self.assertTrue(Role.objects.filter(pk=role.id).exists())

    def test_cannot_edit_locked_role(self):
        role = TestDataFactory.create_role('auditor', is_editable=False)
        response = self.client.patch(f'/api/v1/roles/{role.id}/', {'description': 'changed'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_delete_role_removes_grants(self):
        role = TestDataFactory.create_role('temp', grants=[('youth_profiles', 'view'), ('businesses', 'view')])
        response = self.client.delete(f'/api/v1/roles/{role.id}/')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(RolePermission.objects.filter(role_id=role.id).exists())

    def test_rename_moves_users_to_new_name(self):
        role = TestDataFactory.create_role('coordinator', grants=[('youth_profiles', 'view')])
        user = TestDataFactory.create_user(role='coordinator')
        response = self.client.patch(f'/api/v1/roles/{role.id}/', {'name': 'District Coordinator'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        user.refresh_from_db()
        self.assertEqual(user.role, 'district coordinator')
        self.assertTrue(user_has_permission(user, 'youth_profiles', 'view'))

    def test_cannot_delete_role_still_assigned(self):
        role = TestDataFactory.create_role('coordinator')
        TestDataFactory.create_user(role='coordinator')
        response = self.client.delete(f'/api/v1/roles/{role.id}/')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['error'], "Role 'coordinator' is still assigned to 1 user(s)")
        self.assertTrue(Role.objects.filter(pk=role.id).exists())


class PermissionCheckTests(CacheClearingTestCase):
    """Test the permission check and its denial messages"""

    def test_admin_role_always_allowed(self):
        admin = TestDataFactory.create_admin()
        self.assertTrue(user_has_permission(admin, 'system', 'manage'))

    def test_superuser_always_allowed(self):
        user = TestDataFactory.create_user(role='mentee', is_superuser=True)
        self.assertTrue(user_has_permission(user, 'roles', 'delete'))

    def test_granted_permission(self):
        TestDataFactory.create_role('mentor', grants=[('businesses', 'view')])
        user = TestDataFactory.create_user(role='mentor')
        self.assertEqual(check_permission(user, 'businesses', 'view'), (True, None))

    def test_missing_grant_message(self):
        TestDataFactory.create_role('mentor', grants=[('businesses', 'view')])
        user = TestDataFactory.create_user(role='mentor')
        self.assertEqual(
            check_permission(user, 'businesses', 'delete'),
            (False, "You don't have permission to delete businesses"),
        )

    def test_role_not_in_system_message(self):
        user = TestDataFactory.create_user(role='reviewer')
        self.assertEqual(check_permission(user, 'reports', 'view'), (False, 'Role not found in system'))

    def test_no_role_message(self):
        user = TestDataFactory.create_user(role='')
        self.assertEqual(check_permission(user, 'reports', 'view'), (False, 'User has no assigned role'))

    def test_inactive_role_is_not_found(self):
        TestDataFactory.create_role('mentor', grants=[('businesses', 'view')], is_active=False)
        user = TestDataFactory.create_user(role='mentor')
        self.assertEqual(check_permission(user, 'businesses', 'view'), (False, 'Role not found in system'))

    def test_unregistered_pair_rejected_at_declaration(self):
        with self.assertRaises(ValueError):
            HasResourcePermission('inventory', 'view')
        with self.assertRaises(ValueError):
            HasResourcePermission('businesses', 'approve')

    def test_permission_class_reports_denial_message(self):
        TestDataFactory.create_role('mentee', grants=[])
        user = TestDataFactory.create_user(role='mentee')
        request = APIRequestFactory().get('/')
        request.user = user
        permission = HasResourcePermission('roles', 'view')()
        self.assertFalse(permission.has_permission(request, None))
        self.assertEqual(permission.message, "You don't have permission to view roles")

    def test_grant_takes_effect_immediately(self):
        """Cached permission sets are dropped when a grant is added"""
        role = TestDataFactory.create_role('mentor', grants=[])
        user = TestDataFactory.create_user(role='mentor')
        self.assertFalse(user_has_permission(user, 'businesses', 'view'))
        RolePermission.objects.create(role=role, resource='businesses', action='view')
        self.assertTrue(user_has_permission(user, 'businesses', 'view'))


class RolePermissionEndpointTests(CacheClearingTestCase):
    """Test grant, revoke and batch endpoints"""

    def setUp(self):
        super().setUp()
        self.admin = TestDataFactory.create_admin()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.admin)
        self.role = TestDataFactory.create_role('mentor', grants=[('businesses', 'view')])

    def test_list_role_permissions(self):
        response = self.client.get('/api/v1/role-permissions/mentor/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]['resource'], 'businesses')

    def test_add_permission(self):
        response = self.client.post('/api/v1/role-permissions/',
                                    {'role': 'mentor', 'resource': 'business_tracking', 'action': 'create'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(RolePermission.objects.filter(role=self.role, resource='business_tracking', action='create').exists())

    def test_add_existing_permission_conflict(self):
        response = self.client.post('/api/v1/role-permissions/',
                                    {'role': 'mentor', 'resource': 'businesses', 'action': 'view'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_add_unknown_resource_rejected(self):
        response = self.client.post('/api/v1/role-permissions/',
                                    {'role': 'mentor', 'resource': 'warehouses', 'action': 'view'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_remove_permission(self):
        response = self.client.delete('/api/v1/role-permissions/remove/',
                                      {'role': 'mentor', 'resource': 'businesses', 'action': 'view'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(RolePermission.objects.filter(role=self.role).exists())

    def test_remove_missing_permission_not_found(self):
        response = self.client.delete('/api/v1/role-permissions/remove/',
                                      {'role': 'mentor', 'resource': 'reports', 'action': 'view'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_batch_update(self):
        response = self.client.put('/api/v1/role-permissions/batch/', {
            'role': 'mentor',
            'permissions': [
                {'resource': 'businesses', 'action': 'view', 'granted': False},
                {'resource': 'business_advice', 'action': 'create', 'granted': True},
                {'resource': 'business_advice', 'action': 'view', 'granted': True},
            ],
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['results'], {'added': 2, 'removed': 1})
        self.assertEqual(
            set(RolePermission.objects.filter(role=self.role).values_list('resource', 'action')),
            {('business_advice', 'create'), ('business_advice', 'view')},
        )

    def test_resources_actions(self):
        response = self.client.get('/api/v1/role-permissions/resources-actions/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['total_possible'], len(RESOURCES) * len(ACTIONS))

    def test_my_permissions_for_role(self):
        user = TestDataFactory.create_user(role='mentor')
        self.client.authenticate_user(user)
        response = self.client.get('/api/v1/permissions/me/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['permissions'], [{'resource': 'businesses', 'action': 'view'}])

    def test_non_admin_cannot_grant(self):
        user = TestDataFactory.create_user(role='mentor')
        self.client.authenticate_user(user)
        response = self.client.post('/api/v1/role-permissions/',
                                    {'role': 'mentor', 'resource': 'roles', 'action': 'manage'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['error'], "You don't have permission to manage permissions")


class PermissionGenerationTests(CacheClearingTestCase):
    """Test generating and resetting the permission table from the registry"""

    def test_generate_missing_permissions_is_idempotent(self):
        first = services.generate_missing_permissions()
        self.assertEqual(first['missing_permissions'], len(all_pairs()))
        self.assertEqual(first['created'], 2 * len(all_pairs()))
        count = Permission.objects.count()

        second = services.generate_missing_permissions()
        self.assertEqual(second['created'], 0)
        self.assertEqual(second['missing_permissions'], 0)
        self.assertEqual(Permission.objects.count(), count)
        self.assertEqual(second['admin_has'], len(all_pairs()))

    def test_generate_fills_only_gaps(self):
        Permission.objects.create(resource='users', action='view')
        result = services.generate_missing_permissions()
        self.assertEqual(result['existing_permissions'], 1)
        self.assertEqual(result['missing_permissions'], len(all_pairs()) - 1)

    def test_dry_run_creates_nothing(self):
        result = services.generate_missing_permissions(dry_run=True)
        self.assertEqual(result['created'], 0)
        self.assertEqual(Permission.objects.count(), 0)

    def test_generate_endpoint(self):
        client = AuthenticatedAPIClient().authenticate_user(TestDataFactory.create_admin())
        response = client.post('/api/v1/admin/permissions-control/generate-missing-permissions/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['success'])
        self.assertEqual(response.data['data']['total_possible'], len(all_pairs()))

    def test_reset_permissions(self):
        admin_role = services.get_admin_role()
        RolePermission.objects.create(role=admin_role, resource='users', action='view')
        result = services.reset_admin_permissions()
        self.assertEqual(result['removed'], 1)
        self.assertEqual(result['granted'], len(all_pairs()))

    def test_seed_roles_command(self):
        call_command('seed_roles')
        self.assertTrue(Role.objects.filter(name='admin', is_editable=False).exists())
        self.assertTrue(RolePermission.objects.filter(role__name='mentor', resource='business_tracking', action='create').exists())

        call_command('seed_roles')
        self.assertEqual(Role.objects.filter(name='mentor').count(), 1)
