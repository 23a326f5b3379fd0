"""
Test suite for authentication, users, settings, activity log and dashboard
"""
from io import StringIO
from unittest import mock

from django.core.management import call_command
from django.core.management.base import CommandError
from rest_framework import status
from rest_framework_simplejwt.tokens import AccessToken
from backend.access.registry import all_pairs
from backend.mentors.models import Mentor, MentorBusinessRelationship
from backend.youth.models import YouthProfile, Education
from .models import User, Setting, AuditLog
from .test_utils import TestDataFactory, AuthenticatedAPIClient, CacheClearingTestCase


class AuthTests(CacheClearingTestCase):
    """Test registration, login and the current-user endpoint"""

    def setUp(self):
        super().setUp()
        self.client = AuthenticatedAPIClient()

    def test_register_always_creates_mentee(self):
        response = self.client.post('/api/v1/auth/register/', {
            'username': 'newcomer',
            'email': 'newcomer@example.com',
            'password': 'Kente-Cloth-2024',
            'password_confirm': 'Kente-Cloth-2024',
            'role': 'admin',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertIn('access', response.data)
        self.assertEqual(response.data['user']['role'], 'mentee')
        self.assertEqual(User.objects.get(username='newcomer').role, 'mentee')

    def test_register_password_mismatch(self):
        response = self.client.post('/api/v1/auth/register/', {
            'username': 'newcomer',
            'password': 'Kente-Cloth-2024',
            'password_confirm': 'something-else',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('password', response.data)

    def test_login_token_carries_role(self):
        TestDataFactory.create_user(username='ama', role='mentor')
        response = self.client.post('/api/v1/auth/login/', {'username': 'ama', 'password': 'testpass123'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['user']['username'], 'ama')
        token = AccessToken(response.data['access'])
        self.assertEqual(token['role'], 'mentor')
        self.assertEqual(token['username'], 'ama')

    def test_login_wrong_password(self):
        TestDataFactory.create_user(username='ama')
        response = self.client.post('/api/v1/auth/login/', {'username': 'ama', 'password': 'nope'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_me_lists_role_permissions(self):
        TestDataFactory.create_role('mentee', grants=[('youth_profiles', 'view'), ('dashboard', 'view')])
        user = TestDataFactory.create_user(role='mentee')
        self.client.authenticate_user(user)
        response = self.client.get('/api/v1/auth/me/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['permissions'], [
            {'resource': 'dashboard', 'action': 'view'},
            {'resource': 'youth_profiles', 'action': 'view'},
        ])

    def test_me_admin_has_every_permission(self):
        self.client.authenticate_user(TestDataFactory.create_admin())
        response = self.client.get('/api/v1/auth/me/')
        self.assertEqual(len(response.data['permissions']), len(all_pairs()))

    def test_me_requires_authentication(self):
        response = self.client.get('/api/v1/auth/me/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class UserManagementTests(CacheClearingTestCase):

    def setUp(self):
        super().setUp()
        self.admin = TestDataFactory.create_admin()
        self.client = AuthenticatedAPIClient().authenticate_user(self.admin)

    def test_admin_creates_user_with_role(self):
        TestDataFactory.create_role('mentor')
        response = self.client.post('/api/v1/users/', {
            'username': 'kofi',
            'password': 'Kente-Cloth-2024',
            'password_confirm': 'Kente-Cloth-2024',
            'role': 'mentor',
            'district': 'Gushegu, Ghana',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        user = User.objects.get(username='kofi')
        self.assertEqual(user.role, 'mentor')
        self.assertEqual(user.district, 'Gushegu')
        self.assertTrue(user.check_password('Kente-Cloth-2024'))

    def test_assign_custom_role(self):
        TestDataFactory.create_role('field officer', grants=[('youth_profiles', 'view')])
        user = TestDataFactory.create_user()
        response = self.client.patch(f'/api/v1/users/{user.id}/', {'role': 'field officer'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        user.refresh_from_db()
        self.assertEqual(user.role, 'field officer')

    def test_unknown_or_inactive_role_rejected(self):
        TestDataFactory.create_role('retired', is_active=False)
        user = TestDataFactory.create_user()
        for role in ('nobody', 'retired'):
            response = self.client.patch(f'/api/v1/users/{user.id}/', {'role': role}, format='json')
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertIn('role', response.data)

        response = self.client.post('/api/v1/users/', {
            'username': 'ama',
            'password': 'Kente-Cloth-2024',
            'password_confirm': 'Kente-Cloth-2024',
            'role': 'nobody',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(User.objects.filter(username='ama').exists())
        user.refresh_from_db()
        self.assertEqual(user.role, 'mentee')

    def test_delete_user(self):
        user = TestDataFactory.create_user()
        response = self.client.delete(f'/api/v1/users/{user.id}/')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(User.objects.filter(id=user.id).exists())

    def test_cannot_delete_user_with_tracking_records(self):
        user = TestDataFactory.create_user()
        TestDataFactory.create_tracking(TestDataFactory.create_business(), user, actual_revenue=100)
        response = self.client.delete(f'/api/v1/users/{user.id}/')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertIn('business tracking', response.data['error'])
        self.assertTrue(User.objects.filter(id=user.id).exists())

    def test_cannot_delete_user_whose_mentor_has_history(self):
        mentor = TestDataFactory.create_mentor()
        TestDataFactory.assign_mentor(mentor, TestDataFactory.create_business())
        response = self.client.delete(f'/api/v1/users/{mentor.user_id}/')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertTrue(User.objects.filter(id=mentor.user_id).exists())
        self.assertTrue(Mentor.objects.filter(id=mentor.id).exists())
        self.assertEqual(MentorBusinessRelationship.objects.filter(mentor=mentor).count(), 1)

    def test_cannot_delete_self(self):
        response = self.client.delete(f'/api/v1/users/{self.admin.id}/')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(User.objects.filter(id=self.admin.id).exists())

    def test_user_without_role_row_is_denied(self):
        client = AuthenticatedAPIClient().authenticate_user(TestDataFactory.create_user(role='mentee'))
        response = client.get('/api/v1/users/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['error'], 'Role not found in system')

    def test_mentee_cannot_list_users(self):
        TestDataFactory.create_role('mentee', grants=[('dashboard', 'view')])
        client = AuthenticatedAPIClient().authenticate_user(TestDataFactory.create_user(role='mentee'))
        response = client.get('/api/v1/users/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['error'], "You don't have permission to view users")


class SettingAndActivityTests(CacheClearingTestCase):

    def setUp(self):
        super().setUp()
        self.admin = TestDataFactory.create_admin()
        self.client = AuthenticatedAPIClient().authenticate_user(self.admin)

    def test_create_setting_is_audited(self):
        response = self.client.post('/api/v1/settings/', {'key': 'program_year', 'value': '2024'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        log = AuditLog.objects.get(model_name='Setting')
        self.assertEqual(log.action, 'create')
        self.assertEqual(log.user, self.admin)
        self.assertEqual(log.object_name, 'program_year')

    def test_writing_settings_needs_manage(self):
        TestDataFactory.create_role('manager', grants=[('system_settings', 'view'), ('system_settings', 'create')])
        client = AuthenticatedAPIClient().authenticate_user(TestDataFactory.create_user(role='manager'))
        self.assertEqual(client.get('/api/v1/settings/').status_code, status.HTTP_200_OK)
        response = client.post('/api/v1/settings/', {'key': 'program_year', 'value': '2024'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(Setting.objects.exists())

    def test_activity_filters(self):
        self.client.post('/api/v1/settings/', {'key': 'a', 'value': '1'}, format='json')
        TestDataFactory.create_business()
        self.client.post('/api/v1/makerspaces/', {'name': 'Hub', 'address': 'x', 'district': 'Bekwai'}, format='json')

        response = self.client.get('/api/v1/activities/?model=Makerspace')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row['model_name'] for row in response.data], ['Makerspace'])
        self.assertEqual(response.data[0]['username'], self.admin.username)

        response = self.client.get('/api/v1/activities/?limit=1')
        self.assertEqual(len(response.data), 1)

        response = self.client.get(f"/api/v1/activities/{response.data[0]['id']}/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)


class DashboardAndSearchTests(CacheClearingTestCase):

    def setUp(self):
        super().setUp()
        self.admin = TestDataFactory.create_admin()
        self.client = AuthenticatedAPIClient().authenticate_user(self.admin)

    def test_dashboard_stats(self):
        youth = TestDataFactory.create_youth(district='Bekwai', dare_model='Collaborative')
        TestDataFactory.create_youth(district='Gushegu')
        TestDataFactory.create_youth(is_deleted=True)
        business = TestDataFactory.create_business(youth=youth)
        TestDataFactory.assign_mentor(TestDataFactory.create_mentor(), business)

        response = self.client.get('/api/v1/dashboard/stats/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['total_youth'], 2)
        self.assertEqual(response.data['total_businesses'], 1)
        self.assertEqual(response.data['total_mentors'], 1)
        self.assertEqual(response.data['active_mentorships'], 1)
        self.assertEqual(response.data['youth_by_district'], {'Bekwai': 1, 'Gushegu': 1})
        self.assertEqual(response.data['youth_by_dare_model'], {'Collaborative': 1, 'Unknown': 1})

    def test_dashboard_cache_is_invalidated_on_change(self):
        TestDataFactory.create_youth()
        self.assertEqual(self.client.get('/api/v1/dashboard/stats/').data['total_youth'], 1)

        TestDataFactory.create_youth()
        self.assertEqual(self.client.get('/api/v1/dashboard/stats/').data['total_youth'], 2)

    def test_search(self):
        TestDataFactory.create_youth(full_name='Abena Kyei')
        TestDataFactory.create_business(business_name='Kyei Bakery')
        TestDataFactory.create_mentor(name='Yaw Mensah')

        response = self.client.get('/api/v1/search/?q=kyei')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row['full_name'] for row in response.data['youth']], ['Abena Kyei'])
        self.assertEqual([row['business_name'] for row in response.data['businesses']], ['Kyei Bakery'])
        self.assertEqual(response.data['mentors'], [])

    def test_unexpected_failure_returns_json_500(self):
        with mock.patch('backend.core.views._compute_dashboard_stats', side_effect=RuntimeError('database went away')):
            response = self.client.get('/api/v1/dashboard/stats/')
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {'error': 'Internal server error', 'details': 'database went away'})

    def test_empty_search(self):
        response = self.client.get('/api/v1/search/?q=')
        self.assertEqual(response.data, {'youth': [], 'businesses': [], 'mentors': []})


class ClearYouthDataTests(CacheClearingTestCase):
    """Test the bulk youth data cleanup (endpoint and management command)"""

    def setUp(self):
        super().setUp()
        self.admin = TestDataFactory.create_admin()
        self.client = AuthenticatedAPIClient().authenticate_user(self.admin)
        youth = TestDataFactory.create_youth()
        TestDataFactory.create_education(youth)
        TestDataFactory.create_enrolment(youth)
        business = TestDataFactory.create_business(youth=youth)
        TestDataFactory.create_tracking(business, self.admin, actual_revenue=100)
        self.mentor = TestDataFactory.create_mentor()
        TestDataFactory.assign_mentor(self.mentor, business)

    def test_requires_confirmation(self):
        response = self.client.post('/api/v1/admin/clear-youth-data/', {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(YouthProfile.objects.count(), 1)

    def test_clear_youth_data(self):
        response = self.client.post('/api/v1/admin/clear-youth-data/', {'confirm': True}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['success'])
        self.assertEqual(response.data['deleted']['youth.YouthProfile'], 1)
        self.assertEqual(response.data['deleted']['businesses.BusinessTracking'], 1)

        self.assertFalse(YouthProfile.objects.exists())
        self.assertFalse(Education.objects.exists())
        # Mentors and users survive
        self.assertTrue(Mentor.objects.filter(id=self.mentor.id).exists())
        self.assertTrue(User.objects.filter(id=self.admin.id).exists())
        self.assertTrue(AuditLog.objects.filter(action='clear_data').exists())

    def test_only_admins_can_clear(self):
        TestDataFactory.create_role('manager', grants=[('youth_profiles', 'delete')])
        client = AuthenticatedAPIClient().authenticate_user(TestDataFactory.create_user(role='manager'))
        response = client.post('/api/v1/admin/clear-youth-data/', {'confirm': True}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(YouthProfile.objects.count(), 1)

    def test_command_requires_confirm(self):
        with self.assertRaises(CommandError):
            call_command('clear_youth_data', stdout=StringIO())
        self.assertEqual(YouthProfile.objects.count(), 1)

    def test_command_clears_data(self):
        out = StringIO()
        call_command('clear_youth_data', '--confirm', stdout=out)
        self.assertFalse(YouthProfile.objects.exists())
        self.assertIn('youth.YouthProfile: 1 deleted', out.getvalue())
