"""
Test suite for mentors and mentor-business assignments
"""
from rest_framework import status
from backend.core.test_utils import TestDataFactory, AuthenticatedAPIClient, CacheClearingTestCase
from .models import Mentor, MentorBusinessRelationship, MentorshipMessage, BusinessAdvice


class MentorTests(CacheClearingTestCase):
    """Test mentor endpoints"""

    def setUp(self):
        super().setUp()
        self.admin = TestDataFactory.create_admin()
        self.client = AuthenticatedAPIClient().authenticate_user(self.admin)

    def test_create_mentor(self):
        user = TestDataFactory.create_user(role='mentor')
        response = self.client.post('/api/v1/mentors/', {
            'user': user.id,
            'name': 'Kwesi Appiah',
            'assigned_district': 'Yilo Krobo, Ghana',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['assigned_district'], 'Yilo Krobo')
        self.assertEqual(response.data['active_business_count'], 0)

    def test_one_mentor_profile_per_user(self):
        mentor = TestDataFactory.create_mentor()
        response = self.client.post('/api/v1/mentors/', {'user': mentor.user_id, 'name': 'Again'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('user', response.data)

    def test_list_active_only(self):
        TestDataFactory.create_mentor(name='Active')
        TestDataFactory.create_mentor(name='Retired', is_active=False)
        response = self.client.get('/api/v1/mentors/?active=true')
        self.assertEqual([row['name'] for row in response.data], ['Active'])

    def test_delete_mentor_without_history(self):
        mentor = TestDataFactory.create_mentor()
        response = self.client.delete(f'/api/v1/mentors/{mentor.id}/')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Mentor.objects.filter(id=mentor.id).exists())

    def test_delete_mentor_with_assignments_deactivates(self):
        mentor = TestDataFactory.create_mentor()
        assignment = TestDataFactory.assign_mentor(mentor, TestDataFactory.create_business())

        response = self.client.delete(f'/api/v1/mentors/{mentor.id}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['outcome'], 'deactivated')
        self.assertEqual(response.data['closed_assignments'], 1)

        mentor.refresh_from_db()
        assignment.refresh_from_db()
        self.assertFalse(mentor.is_active)
        self.assertFalse(assignment.is_active)

    def test_force_delete_removes_history(self):
        mentor = TestDataFactory.create_mentor()
        business = TestDataFactory.create_business()
        TestDataFactory.assign_mentor(mentor, business)
        MentorshipMessage.objects.create(mentor=mentor, business=business, message='Hello', sender='mentor')

        response = self.client.delete(f'/api/v1/mentors/{mentor.id}/?force=true')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Mentor.objects.filter(id=mentor.id).exists())
        self.assertFalse(MentorBusinessRelationship.objects.exists())
        self.assertFalse(MentorshipMessage.objects.exists())

    def test_mentee_cannot_manage_mentors(self):
        TestDataFactory.create_role('mentee', grants=[('mentors', 'view')])
        client = AuthenticatedAPIClient().authenticate_user(TestDataFactory.create_user(role='mentee'))
        mentor = TestDataFactory.create_mentor()

        self.assertEqual(client.get('/api/v1/mentors/').status_code, status.HTTP_200_OK)
        response = client.delete(f'/api/v1/mentors/{mentor.id}/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(Mentor.objects.filter(id=mentor.id).exists())


class MentorAssignmentTests(CacheClearingTestCase):
    """Test mentor-business assignment endpoints"""

    def setUp(self):
        super().setUp()
        self.admin = TestDataFactory.create_admin()
        self.client = AuthenticatedAPIClient().authenticate_user(self.admin)
        self.mentor = TestDataFactory.create_mentor(name='Ama Darko')
        self.business = TestDataFactory.create_business(business_name='Shea Butter Co')

    def test_assign_mentor(self):
        response = self.client.post('/api/v1/mentor-businesses/', {
            'mentor': self.mentor.id,
            'business': self.business.id,
            'mentorship_focus': 'Business Growth',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['mentor_name'], 'Ama Darko')
        self.assertEqual(response.data['business_name'], 'Shea Butter Co')

    def test_duplicate_assignment_conflict(self):
        TestDataFactory.assign_mentor(self.mentor, self.business)
        response = self.client.post('/api/v1/mentor-businesses/', {
            'mentor': self.mentor.id,
            'business': self.business.id,
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(MentorBusinessRelationship.objects.count(), 1)

    def test_inactive_mentor_cannot_be_assigned(self):
        self.mentor.is_active = False
        self.mentor.save()
        response = self.client.post('/api/v1/mentor-businesses/', {
            'mentor': self.mentor.id,
            'business': self.business.id,
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_assignments_by_mentor_and_business(self):
        TestDataFactory.assign_mentor(self.mentor, self.business)
        TestDataFactory.assign_mentor(TestDataFactory.create_mentor(), TestDataFactory.create_business())

        response = self.client.get(f'/api/v1/mentor-businesses/mentor/{self.mentor.id}/')
        self.assertEqual([row['business'] for row in response.data], [self.business.id])

        response = self.client.get(f'/api/v1/mentor-businesses/business/{self.business.id}/')
        self.assertEqual([row['mentor'] for row in response.data], [self.mentor.id])

    def test_delete_pair(self):
        TestDataFactory.assign_mentor(self.mentor, self.business)
        url = f'/api/v1/mentor-businesses/mentor/{self.mentor.id}/business/{self.business.id}/'

        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(MentorBusinessRelationship.objects.exists())

        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error'], 'Mentor is not assigned to this business')

    def test_update_to_existing_pair_conflicts(self):
        other_business = TestDataFactory.create_business()
        TestDataFactory.assign_mentor(self.mentor, self.business)
        assignment = TestDataFactory.assign_mentor(self.mentor, other_business)
        response = self.client.patch(f'/api/v1/mentor-businesses/{assignment.id}/',
                                     {'business': self.business.id}, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)


class MentorshipActivityTests(CacheClearingTestCase):
    """Test messages and advice"""

    def setUp(self):
        super().setUp()
        self.admin = TestDataFactory.create_admin()
        self.client = AuthenticatedAPIClient().authenticate_user(self.admin)
        self.mentor = TestDataFactory.create_mentor()
        self.business = TestDataFactory.create_business()

    def test_message_thread_and_mark_read(self):
        response = self.client.post('/api/v1/mentorship-messages/', {
            'mentor': self.mentor.id,
            'business': self.business.id,
            'message': 'How were sales this week?',
            'sender': 'mentor',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertFalse(response.data['is_read'])

        response = self.client.post(f"/api/v1/mentorship-messages/{response.data['id']}/read/")
        self.assertTrue(response.data['is_read'])

        response = self.client.get(f'/api/v1/mentorship-messages/?business={self.business.id}')
        self.assertEqual(len(response.data), 1)

    def test_advice_records_author(self):
        response = self.client.post('/api/v1/business-advice/', {
            'mentor': self.mentor.id,
            'business': self.business.id,
            'advice_content': 'Keep a daily sales book',
            'category': 'finance',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        advice = BusinessAdvice.objects.get(id=response.data['id'])
        self.assertEqual(advice.created_by, self.admin)
        self.assertEqual(advice.implementation_status, 'pending')
