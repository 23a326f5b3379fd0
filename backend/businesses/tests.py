"""
Test suite for businesses, tracking records and resources
"""
from datetime import date
from decimal import Decimal

from django.test import SimpleTestCase
from rest_framework import status
from backend.core.test_utils import TestDataFactory, AuthenticatedAPIClient, CacheClearingTestCase
from .models import BusinessProfile, BusinessTracking, BusinessResource, BusinessResourceCost
from .stats import growth_rate, round_half_up


class GrowthRateTests(SimpleTestCase):
    def test_halves_round_up(self):
        self.assertEqual(round_half_up(2.25), 2.3)
        self.assertEqual(round_half_up(-2.25), -2.2)

    def test_growth_against_previous(self):
        self.assertEqual(growth_rate(1250, 1000), 25.0)
        self.assertEqual(growth_rate(800, 1000), -20.0)

    def test_exact_halves_round_up(self):
        # 23/80 and 41/80 give 28.75 and 51.25, which floats store just below the half
        self.assertEqual(growth_rate(103, 80), 28.8)
        self.assertEqual(growth_rate(121, 80), 51.3)
        self.assertEqual(growth_rate(57, 80), -28.7)

    def test_no_growth_without_positive_previous(self):
        self.assertEqual(growth_rate(500, None), 0.0)
        self.assertEqual(growth_rate(500, 0), 0.0)


class BusinessProfileTests(CacheClearingTestCase):
    """Test business profile and membership endpoints"""

    def setUp(self):
        super().setUp()
        self.user = TestDataFactory.create_admin()
        self.client = AuthenticatedAPIClient().authenticate_user(self.user)

    def test_create_business(self):
        response = self.client.post('/api/v1/businesses/', {
            'business_name': '  Adwoa Tailoring ',
            'district': 'Gushegu, Ghana',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['business_name'], 'Adwoa Tailoring')
        self.assertEqual(response.data['district'], 'Gushegu')

    def test_add_member_and_duplicate_conflict(self):
        business = TestDataFactory.create_business()
        youth = TestDataFactory.create_youth()
        url = f'/api/v1/businesses/{business.id}/members/'

        response = self.client.post(url, {'youth': youth.id, 'role': 'Owner'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['youth_name'], youth.full_name)

        response = self.client.post(url, {'youth': youth.id, 'role': 'Partner'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_remove_member(self):
        youth = TestDataFactory.create_youth()
        business = TestDataFactory.create_business(youth=youth)
        response = self.client.delete(f'/api/v1/businesses/{business.id}/members/{youth.id}/')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(business.youth_relationships.exists())

    def test_youth_businesses(self):
        youth = TestDataFactory.create_youth()
        business = TestDataFactory.create_business(youth=youth)
        TestDataFactory.create_business()
        response = self.client.get(f'/api/v1/youth-profiles/{youth.id}/businesses/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row['business'] for row in response.data], [business.id])

    def test_delete_business_removes_tracking(self):
        business = TestDataFactory.create_business()
        TestDataFactory.create_tracking(business, self.user, actual_revenue=100)
        response = self.client.delete(f'/api/v1/businesses/{business.id}/')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(BusinessProfile.objects.filter(id=business.id).exists())
        self.assertEqual(BusinessTracking.objects.count(), 0)


class BusinessTrackingTests(CacheClearingTestCase):
    """Test tracking records, verification and stats"""

    def setUp(self):
        super().setUp()
        self.admin = TestDataFactory.create_admin()
        self.client = AuthenticatedAPIClient().authenticate_user(self.admin)
        self.business = TestDataFactory.create_business()

    def test_admin_records_tracking(self):
        response = self.client.post('/api/v1/business-tracking/', {
            'business': self.business.id,
            'tracking_date': '2024-03-15',
            'actual_revenue': 1500,
            'actual_employees': 3,
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        record = BusinessTracking.objects.get(id=response.data['id'])
        self.assertEqual(record.recorded_by, self.admin)
        self.assertEqual(record.tracking_year, 2024)
        self.assertFalse(record.is_verified)

    def test_mentor_records_tracking(self):
        TestDataFactory.create_role('mentor', grants=[('business_tracking', 'view'), ('business_tracking', 'create')])
        mentor_user = TestDataFactory.create_user(role='mentor')
        client = AuthenticatedAPIClient().authenticate_user(mentor_user)
        response = client.post('/api/v1/business-tracking/', {
            'business': self.business.id,
            'tracking_date': '2024-04-01',
            'actual_revenue': 200,
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_other_roles_cannot_record_tracking(self):
        """A role granted business_tracking:create is still refused unless it is admin or mentor"""
        TestDataFactory.create_role('reviewer', grants=[('business_tracking', 'view'), ('business_tracking', 'create')])
        reviewer = TestDataFactory.create_user(role='reviewer')
        client = AuthenticatedAPIClient().authenticate_user(reviewer)
        response = client.post('/api/v1/business-tracking/', {
            'business': self.business.id,
            'tracking_date': '2024-04-01',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['error'], 'Only administrators and mentors can record business tracking')
        self.assertEqual(BusinessTracking.objects.count(), 0)

    def test_negative_revenue_rejected(self):
        response = self.client.post('/api/v1/business-tracking/', {
            'business': self.business.id,
            'actual_revenue': -10,
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('actual_revenue', response.data)

    def test_verify_tracking(self):
        record = TestDataFactory.create_tracking(self.business, self.admin, actual_revenue=100)
        response = self.client.post(f'/api/v1/business-tracking/{record.id}/verify/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        record.refresh_from_db()
        self.assertTrue(record.is_verified)
        self.assertEqual(record.verified_by, self.admin)
        self.assertIsNotNone(record.verification_date)

    def test_verify_requires_update_permission(self):
        TestDataFactory.create_role('mentor', grants=[('business_tracking', 'view'), ('business_tracking', 'create')])
        client = AuthenticatedAPIClient().authenticate_user(TestDataFactory.create_user(role='mentor'))
        record = TestDataFactory.create_tracking(self.business, self.admin)
        response = client.post(f'/api/v1/business-tracking/{record.id}/verify/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['error'], "You don't have permission to update business_tracking")

    def test_stats_growth_between_months(self):
        TestDataFactory.create_tracking(self.business, self.admin, date(2024, 1, 10), actual_revenue=1000, actual_employees=2)
        TestDataFactory.create_tracking(self.business, self.admin, date(2024, 3, 5), actual_revenue=1250, actual_employees=4)

        response = self.client.get(f'/api/v1/businesses/{self.business.id}/stats/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['latest_revenue'], 1250)
        self.assertEqual(response.data['current_employees'], 4)
        self.assertEqual(response.data['growth_rate'], 25.0)
        self.assertEqual(response.data['record_count'], 2)
        self.assertEqual([point['value'] for point in response.data['revenue_timeline']], [1000, 1250])

    def test_stats_skip_records_from_the_same_month(self):
        TestDataFactory.create_tracking(self.business, self.admin, date(2024, 2, 1), actual_revenue=500)
        TestDataFactory.create_tracking(self.business, self.admin, date(2024, 3, 2), actual_revenue=900)
        TestDataFactory.create_tracking(self.business, self.admin, date(2024, 3, 20), actual_revenue=1000)

        response = self.client.get(f'/api/v1/businesses/{self.business.id}/stats/')
        self.assertEqual(response.data['latest_revenue'], 1000)
        self.assertEqual(response.data['growth_rate'], 100.0)

    def test_stats_zero_previous_revenue(self):
        TestDataFactory.create_tracking(self.business, self.admin, date(2024, 1, 1), actual_revenue=0)
        TestDataFactory.create_tracking(self.business, self.admin, date(2024, 2, 1), actual_revenue=300)
        response = self.client.get(f'/api/v1/businesses/{self.business.id}/stats/')
        self.assertEqual(response.data['growth_rate'], 0.0)

    def test_stats_without_records(self):
        response = self.client.get(f'/api/v1/businesses/{self.business.id}/stats/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['record_count'], 0)
        self.assertEqual(response.data['growth_rate'], 0.0)
        self.assertEqual(response.data['revenue_timeline'], [])

    def test_business_tracking_list_newest_first(self):
        older = TestDataFactory.create_tracking(self.business, self.admin, date(2024, 1, 1))
        newer = TestDataFactory.create_tracking(self.business, self.admin, date(2024, 5, 1))
        response = self.client.get(f'/api/v1/businesses/{self.business.id}/tracking/')
        self.assertEqual([row['id'] for row in response.data], [newer.id, older.id])

    def test_attachments(self):
        record = TestDataFactory.create_tracking(self.business, self.admin)
        response = self.client.post(f'/api/v1/business-tracking/{record.id}/attachments/', {
            'attachment_name': 'receipt.jpg',
            'attachment_type': 'image/jpeg',
            'attachment_url': '/media/receipts/receipt.jpg',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

        response = self.client.delete(f"/api/v1/business-tracking/attachments/{response.data['id']}/")
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(record.attachments.exists())


class BusinessResourceTests(CacheClearingTestCase):
    """Test business resources and their costs"""

    def setUp(self):
        super().setUp()
        self.user = TestDataFactory.create_admin()
        self.client = AuthenticatedAPIClient().authenticate_user(self.user)
        self.business = TestDataFactory.create_business()
        self.url = f'/api/v1/businesses/{self.business.id}/resources/'

    def test_create_resource_computes_total_cost(self):
        response = self.client.post(self.url, {
            'name': 'Sewing machine',
            'category': 'Equipment',
            'quantity': 2,
            'unit_cost': '125.50',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        resource = BusinessResource.objects.get(id=response.data['id'])
        self.assertEqual(resource.total_cost, Decimal('251.00'))
        self.assertEqual(resource.created_by, self.user)

    def test_negative_quantity_rejected(self):
        response = self.client.post(self.url, {
            'name': 'Thread',
            'category': 'Material',
            'quantity': -1,
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('quantity', response.data)
        self.assertEqual(BusinessResource.objects.count(), 0)

    def test_update_recomputes_total_cost(self):
        resource = BusinessResource.objects.create(
            business=self.business, name='Scissors', category='Tool', quantity=1, unit_cost=Decimal('10.00')
        )
        response = self.client.patch(f'/api/v1/business-resources/{resource.id}/', {'quantity': 5}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        resource.refresh_from_db()
        self.assertEqual(resource.total_cost, Decimal('50.00'))

    def test_resource_stats(self):
        BusinessResource.objects.create(business=self.business, name='Oven', category='Equipment',
                                        quantity=1, unit_cost=Decimal('300.00'))
        BusinessResource.objects.create(business=self.business, name='Flour', category='Material',
                                        quantity=10, unit_cost=Decimal('2.50'), status='In Use')
        BusinessResource.objects.create(business=self.business, name='Trays', category='Equipment', quantity=4)

        response = self.client.get(f'/api/v1/businesses/{self.business.id}/resource-stats/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['total_resources'], 3)
        self.assertEqual(response.data['count_by_category'], {'Equipment': 2, 'Material': 1})
        self.assertEqual(response.data['count_by_status'], {'Available': 2, 'In Use': 1})
        self.assertEqual(response.data['total_value'], 325.0)

    def test_add_and_delete_cost(self):
        resource = BusinessResource.objects.create(business=self.business, name='Generator', category='Equipment')
        url = f'/api/v1/business-resources/{resource.id}/costs/'

        response = self.client.post(url, {'cost_type': 'Repair', 'amount': '45.00'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        cost_id = response.data['id']

        response = self.client.get(url)
        self.assertEqual(len(response.data), 1)

        response = self.client.delete(f'/api/v1/business-resource-costs/{cost_id}/')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(BusinessResourceCost.objects.exists())

    def test_zero_cost_rejected(self):
        resource = BusinessResource.objects.create(business=self.business, name='Generator', category='Equipment')
        response = self.client.post(f'/api/v1/business-resources/{resource.id}/costs/',
                                    {'cost_type': 'Repair', 'amount': '0'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('amount', response.data)
