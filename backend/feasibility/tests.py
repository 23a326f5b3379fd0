"""
Test suite for feasibility assessments
"""
from decimal import Decimal

from rest_framework import status
from backend.core.test_utils import TestDataFactory, AuthenticatedAPIClient, CacheClearingTestCase
from .models import FeasibilityAssessment


class FeasibilityAssessmentTests(CacheClearingTestCase):
    """Test the assessment lifecycle: draft, submit, review"""

    def setUp(self):
        super().setUp()
        self.admin = TestDataFactory.create_admin()
        self.client = AuthenticatedAPIClient().authenticate_user(self.admin)
        self.youth = TestDataFactory.create_youth()
        self.business = TestDataFactory.create_business(youth=self.youth)

    def create_assessment(self, **extra):
        return FeasibilityAssessment.objects.create(business=self.business, youth=self.youth, **extra)

    def test_create_assessment(self):
        response = self.client.post('/api/v1/feasibility-assessments/', {
            'business': self.business.id,
            'youth': self.youth.id,
            'estimated_space_cost': '100.00',
            'equipment_total_cost': '250.00',
            'equipment_cost_contribution': '50.00',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['status'], 'Draft')
        self.assertEqual(Decimal(response.data['total_startup_cost']), Decimal('350.00'))
        self.assertEqual(Decimal(response.data['total_contribution']), Decimal('50.00'))
        assessment = FeasibilityAssessment.objects.get(id=response.data['id'])
        self.assertEqual(assessment.assessment_by, self.admin)

    def test_create_for_missing_business(self):
        response = self.client.post('/api/v1/feasibility-assessments/', {
            'business': 9999,
            'youth': self.youth.id,
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error'], 'Business not found')

    def test_create_with_malformed_ids(self):
        response = self.client.post('/api/v1/feasibility-assessments/', {
            'business': 'abc',
            'youth': self.youth.id,
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('business', response.data)
        self.assertFalse(FeasibilityAssessment.objects.exists())

    def test_create_for_missing_youth(self):
        response = self.client.post('/api/v1/feasibility-assessments/', {
            'business': self.business.id,
            'youth': 9999,
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_cannot_set_reviewed_directly(self):
        assessment = self.create_assessment()
        response = self.client.patch(f'/api/v1/feasibility-assessments/{assessment.id}/',
                                     {'status': 'Reviewed'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_submit_then_review(self):
        assessment = self.create_assessment()

        response = self.client.post(f'/api/v1/feasibility-assessments/{assessment.id}/submit/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'Completed')

        response = self.client.post(f'/api/v1/feasibility-assessments/{assessment.id}/review/', {
            'review_comments': 'Costs are realistic',
            'overall_feasibility_percentage': '80.00',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        assessment.refresh_from_db()
        self.assertEqual(assessment.status, 'Reviewed')
        self.assertEqual(assessment.reviewed_by, self.admin)
        self.assertEqual(assessment.overall_feasibility_percentage, Decimal('80.00'))
        self.assertIsNotNone(assessment.review_date)

    def test_draft_cannot_be_reviewed(self):
        assessment = self.create_assessment()
        response = self.client.post(f'/api/v1/feasibility-assessments/{assessment.id}/review/', {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'Only submitted assessments can be reviewed')

    def test_reviewed_assessment_is_locked(self):
        assessment = self.create_assessment(status='Reviewed')
        response = self.client.patch(f'/api/v1/feasibility-assessments/{assessment.id}/',
                                     {'plan_adjustments': 'Lower prices'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        response = self.client.post(f'/api/v1/feasibility-assessments/{assessment.id}/submit/')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_review_requires_reviewer_role(self):
        TestDataFactory.create_role('mentor', grants=[
            ('feasibility_assessment', 'view'), ('feasibility_assessment', 'update'),
        ])
        client = AuthenticatedAPIClient().authenticate_user(TestDataFactory.create_user(role='mentor'))
        assessment = self.create_assessment(status='Completed')

        response = client.post(f'/api/v1/feasibility-assessments/{assessment.id}/review/', {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        assessment.refresh_from_db()
        self.assertEqual(assessment.status, 'Completed')

    def test_reviewer_can_review(self):
        reviewer = TestDataFactory.create_user(role='reviewer')
        client = AuthenticatedAPIClient().authenticate_user(reviewer)
        assessment = self.create_assessment(status='Completed')

        response = client.post(f'/api/v1/feasibility-assessments/{assessment.id}/review/',
                               {'recommendations': 'Start small'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['reviewed_by'], reviewer.id)

    def test_list_by_business_and_status(self):
        self.create_assessment(status='Completed')
        self.create_assessment()
        FeasibilityAssessment.objects.create(business=TestDataFactory.create_business(), youth=self.youth)

        response = self.client.get(f'/api/v1/feasibility-assessments/business/{self.business.id}/')
        self.assertEqual(len(response.data), 2)

        response = self.client.get('/api/v1/feasibility-assessments/?status=Completed')
        self.assertEqual(len(response.data), 1)
