"""
Test suite for makerspaces and business assignments
"""
from rest_framework import status
from backend.core.test_utils import TestDataFactory, AuthenticatedAPIClient, CacheClearingTestCase
from .models import Makerspace, BusinessMakerspaceAssignment


class MakerspaceTests(CacheClearingTestCase):

    def setUp(self):
        super().setUp()
        self.user = TestDataFactory.create_admin()
        self.client = AuthenticatedAPIClient().authenticate_user(self.user)
        self.makerspace = Makerspace.objects.create(name='Bekwai Hub', address='Main Road', district='Bekwai')

    def test_create_makerspace(self):
        response = self.client.post('/api/v1/makerspaces/', {
            'name': 'Gushegu Workshop',
            'address': 'Market Street',
            'district': 'Gushegu',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['status'], 'Active')
        self.assertEqual(response.data['business_count'], 0)

    def test_filter_by_district(self):
        Makerspace.objects.create(name='Other', address='x', district='Gushegu')
        response = self.client.get('/api/v1/makerspaces/?district=Bekwai')
        self.assertEqual([row['name'] for row in response.data], ['Bekwai Hub'])

    def test_assign_business(self):
        business = TestDataFactory.create_business()
        url = f'/api/v1/makerspaces/{self.makerspace.id}/businesses/'

        response = self.client.post(url, {'business': business.id}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['makerspace_name'], 'Bekwai Hub')
        self.assertEqual(response.data['assigned_by'], self.user.id)

        response = self.client.post(url, {'business': business.id}, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(BusinessMakerspaceAssignment.objects.count(), 1)

    def test_active_assignments_only(self):
        BusinessMakerspaceAssignment.objects.create(business=TestDataFactory.create_business(), makerspace=self.makerspace)
        BusinessMakerspaceAssignment.objects.create(business=TestDataFactory.create_business(),
                                                    makerspace=self.makerspace, is_active=False)
        response = self.client.get(f'/api/v1/makerspaces/{self.makerspace.id}/businesses/?active=true')
        self.assertEqual(len(response.data), 1)

        response = self.client.get(f'/api/v1/makerspaces/{self.makerspace.id}/')
        self.assertEqual(response.data['business_count'], 1)

    def test_unassign_business(self):
        assignment = BusinessMakerspaceAssignment.objects.create(
            business=TestDataFactory.create_business(), makerspace=self.makerspace
        )
        response = self.client.delete(f'/api/v1/business-makerspace/{assignment.id}/')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(BusinessMakerspaceAssignment.objects.exists())

    def test_delete_makerspace_cascades_assignments(self):
        BusinessMakerspaceAssignment.objects.create(business=TestDataFactory.create_business(), makerspace=self.makerspace)
        response = self.client.delete(f'/api/v1/makerspaces/{self.makerspace.id}/')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(BusinessMakerspaceAssignment.objects.exists())
