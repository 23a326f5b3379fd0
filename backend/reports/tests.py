"""
Test suite for Reports module
Tests: Youth Summary, Business Performance, Mentorship
"""
from datetime import date

from rest_framework import status
from backend.core.test_utils import TestDataFactory, AuthenticatedAPIClient, CacheClearingTestCase


class ReportsTests(CacheClearingTestCase):
    """Test report endpoints"""

    def setUp(self):
        super().setUp()
        self.user = TestDataFactory.create_admin()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.user)

    def test_youth_summary(self):
        """Test youth summary counts by district and gender"""
        TestDataFactory.create_youth(district='Bekwai', gender='Female')
        TestDataFactory.create_youth(district='Bekwai', gender='Male')
        TestDataFactory.create_youth(district='Gushegu', gender='Female', refugee_status=True)

        response = self.client.get('/api/v1/reports/youth-summary/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['summary']['total_youth'], 3)
        self.assertEqual(response.data['summary']['refugees'], 1)
        self.assertEqual(response.data['by_district'], {'Bekwai': 2, 'Gushegu': 1})
        self.assertEqual(response.data['by_gender'], {'Female': 2, 'Male': 1})

    def test_youth_summary_filtered_by_district(self):
        TestDataFactory.create_youth(district='Bekwai')
        TestDataFactory.create_youth(district='Gushegu')

        response = self.client.get('/api/v1/reports/youth-summary/?district=Gushegu')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['summary']['total_youth'], 1)

    def test_business_performance_with_date_range(self):
        """Only tracking records inside the range are counted"""
        business = TestDataFactory.create_business(business_name='Kente Works')
        TestDataFactory.create_tracking(business, self.user, tracking_date=date(2024, 1, 15), actual_revenue=500, actual_employees=2)
        TestDataFactory.create_tracking(business, self.user, tracking_date=date(2024, 6, 15), actual_revenue=900, actual_employees=4)

        response = self.client.get('/api/v1/reports/business-performance/?date_from=2024-01-01&date_to=2024-03-31')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        row = response.data['businesses'][0]
        self.assertEqual(row['business_name'], 'Kente Works')
        self.assertEqual(row['record_count'], 1)
        self.assertEqual(row['latest_revenue'], 500)
        self.assertEqual(row['latest_employees'], 2)

    def test_business_performance_invalid_date(self):
        response = self.client.get('/api/v1/reports/business-performance/?date_from=15-01-2024')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('error', response.data)

    def test_mentorship_report(self):
        """Test active assignment counts per mentor"""
        mentor = TestDataFactory.create_mentor(name='Ama Mentor')
        TestDataFactory.assign_mentor(mentor, TestDataFactory.create_business())
        TestDataFactory.assign_mentor(mentor, TestDataFactory.create_business(), is_active=False)
        TestDataFactory.create_business()

        response = self.client.get('/api/v1/reports/mentorship/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['summary']['total_mentors'], 1)
        self.assertEqual(response.data['summary']['unassigned_businesses'], 2)
        self.assertEqual(response.data['mentors'][0]['active_assignments'], 1)
        self.assertEqual(response.data['mentors'][0]['total_assignments'], 2)

    def test_reports_require_permission(self):
        """Roles without reports:view are refused"""
        TestDataFactory.create_role('user', grants=[('dashboard', 'view')])
        user = TestDataFactory.create_user(role='user')
        self.client.authenticate_user(user)

        response = self.client.get('/api/v1/reports/youth-summary/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['error'], "You don't have permission to view reports")
