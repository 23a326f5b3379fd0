"""
Test suite for youth profiles, education, skills and training
"""
from unittest import mock

from django.test import SimpleTestCase
from rest_framework import serializers, status
from backend.core.test_utils import TestDataFactory, AuthenticatedAPIClient, CacheClearingTestCase
from .models import YouthProfile, Education, Certification, YouthSkill, YouthTraining
from .validators import validate_district_value


class DistrictValidationTests(SimpleTestCase):
    def test_ghana_suffix_is_stripped(self):
        self.assertEqual(validate_district_value('Yilo Krobo, Ghana'), 'Yilo Krobo')

    def test_blank_becomes_none(self):
        self.assertIsNone(validate_district_value(''))

    def test_unknown_district_rejected(self):
        with self.assertRaises(serializers.ValidationError):
            validate_district_value('Accra')


class YouthProfileTests(CacheClearingTestCase):
    """Test youth profile endpoints"""

    def setUp(self):
        super().setUp()
        self.user = TestDataFactory.create_admin()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.user)

    def test_create_youth_profile(self):
        response = self.client.post('/api/v1/youth-profiles/', {
            'first_name': 'Akosua',
            'last_name': 'Mensah',
            'participant_code': 'BK-001',
            'district': 'Bekwai, Ghana',
            'gender': 'Female',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['full_name'], 'Akosua Mensah')
        self.assertEqual(response.data['district'], 'Bekwai')

    def test_create_requires_a_name(self):
        response = self.client.post('/api/v1/youth-profiles/', {'district': 'Bekwai'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('full_name', response.data)

    def test_invalid_district_rejected(self):
        response = self.client.post('/api/v1/youth-profiles/', {'full_name': 'Kofi', 'district': 'Kumasi'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('district', response.data)

    def test_duplicate_participant_code_conflict(self):
        TestDataFactory.create_youth(participant_code='GS-010')
        response = self.client.post('/api/v1/youth-profiles/', {'full_name': 'Abena', 'participant_code': 'GS-010'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(YouthProfile.objects.filter(participant_code='GS-010').count(), 1)

    def test_update_to_taken_participant_code_conflict(self):
        TestDataFactory.create_youth(participant_code='GS-011')
        youth = TestDataFactory.create_youth(participant_code='GS-012')
        response = self.client.patch(f'/api/v1/youth-profiles/{youth.id}/', {'participant_code': 'GS-011'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_update_conflict_caught_at_save(self):
        """A code taken between the check and the save still returns 409"""
        TestDataFactory.create_youth(participant_code='GS-013')
        youth = TestDataFactory.create_youth(participant_code='GS-014')
        with mock.patch('backend.youth.views._participant_code_taken', return_value=False):
            response = self.client.patch(f'/api/v1/youth-profiles/{youth.id}/', {'participant_code': 'GS-013'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        youth.refresh_from_db()
        self.assertEqual(youth.participant_code, 'GS-014')

    def test_blank_participant_codes_do_not_collide(self):
        TestDataFactory.create_youth(participant_code='')
        response = self.client.post('/api/v1/youth-profiles/', {'full_name': 'Yaw', 'participant_code': ''}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(YouthProfile.objects.filter(participant_code__isnull=True).count(), 2)

    def test_list_filters_by_district(self):
        TestDataFactory.create_youth(district='Bekwai')
        TestDataFactory.create_youth(district='Gushegu')
        response = self.client.get('/api/v1/youth-profiles/?district=Gushegu')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)

    def test_list_search(self):
        TestDataFactory.create_youth(full_name='Esi Owusu')
        TestDataFactory.create_youth(full_name='Kwame Boateng')
        response = self.client.get('/api/v1/youth-profiles/?search=owusu')
        self.assertEqual([row['full_name'] for row in response.data], ['Esi Owusu'])

    def test_delete_cascades_to_dependent_rows(self):
        """Deleting a youth removes education, training and skill rows"""
        youth = TestDataFactory.create_youth()
        TestDataFactory.create_education(youth)
        TestDataFactory.create_enrolment(youth)
        TestDataFactory.create_youth_skill(youth)
        Certification.objects.create(youth=youth, certification_name='Food Safety')

        response = self.client.delete(f'/api/v1/youth-profiles/{youth.id}/')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(YouthProfile.objects.filter(pk=youth.id).exists())
        self.assertFalse(Education.objects.filter(youth_id=youth.id).exists())
        self.assertFalse(YouthTraining.objects.filter(youth_id=youth.id).exists())
        self.assertFalse(YouthSkill.objects.filter(youth_id=youth.id).exists())
        self.assertFalse(Certification.objects.filter(youth_id=youth.id).exists())

    def test_profile_details(self):
        youth = TestDataFactory.create_youth()
        TestDataFactory.create_education(youth)
        TestDataFactory.create_business(youth=youth, business_name='Adinkra Prints')

        response = self.client.get(f'/api/v1/youth-profiles/{youth.id}/details/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data['education']), 1)
        self.assertEqual(response.data['businesses'][0]['business_name'], 'Adinkra Prints')

    def test_mentee_cannot_delete(self):
        TestDataFactory.create_role('mentee', grants=[('youth_profiles', 'view')])
        youth = TestDataFactory.create_youth()
        self.client.authenticate_user(TestDataFactory.create_user(role='mentee'))
        response = self.client.delete(f'/api/v1/youth-profiles/{youth.id}/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(YouthProfile.objects.filter(pk=youth.id).exists())


class EducationTests(CacheClearingTestCase):
    """Test education endpoints"""

    def setUp(self):
        super().setUp()
        self.client = AuthenticatedAPIClient().authenticate_user(TestDataFactory.create_admin())
        self.youth = TestDataFactory.create_youth()

    def test_batch_replaces_records(self):
        TestDataFactory.create_education(self.youth, qualification_name='Old record')
        response = self.client.post(f'/api/v1/education/{self.youth.id}/batch/', [
            {'qualification_type': 'Secondary', 'qualification_name': 'WASSCE', 'graduation_year': 2019},
            {'qualification_type': 'Tertiary', 'qualification_name': 'HND Fashion', 'is_highest_qualification': True},
        ], format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(
            set(Education.objects.filter(youth=self.youth).values_list('qualification_name', flat=True)),
            {'WASSCE', 'HND Fashion'},
        )

    def test_batch_with_invalid_item_keeps_existing_records(self):
        TestDataFactory.create_education(self.youth, qualification_name='Kept')
        response = self.client.post(f'/api/v1/education/{self.youth.id}/batch/', [
            {'qualification_type': 'Secondary', 'qualification_name': 'WASSCE'},
            {'qualification_type': 'Secondary'},
        ], format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(list(Education.objects.filter(youth=self.youth).values_list('qualification_name', flat=True)), ['Kept'])

    def test_list_by_youth(self):
        TestDataFactory.create_education(self.youth)
        response = self.client.get(f'/api/v1/education/{self.youth.id}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)

    def test_certification_expiry_before_issue_rejected(self):
        response = self.client.post('/api/v1/certifications/', {
            'youth': self.youth.id,
            'certification_name': 'First Aid',
            'issue_date': '2024-05-01',
            'expiry_date': '2024-01-01',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('expiry_date', response.data)


class YouthSkillTests(CacheClearingTestCase):
    """Test youth skill endpoints"""

    def setUp(self):
        super().setUp()
        self.client = AuthenticatedAPIClient().authenticate_user(TestDataFactory.create_admin())
        self.youth = TestDataFactory.create_youth()
        self.skill = TestDataFactory.create_skill('Tailoring')

    def test_add_skill(self):
        response = self.client.post(f'/api/v1/youth-skills/{self.youth.id}/',
                                    {'skill': self.skill.id, 'proficiency': 'Advanced'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['skill_name'], 'Tailoring')

    def test_duplicate_skill_conflict(self):
        TestDataFactory.create_youth_skill(self.youth, self.skill)
        response = self.client.post(f'/api/v1/youth-skills/{self.youth.id}/', {'skill': self.skill.id}, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_remove_skill(self):
        TestDataFactory.create_youth_skill(self.youth, self.skill)
        response = self.client.delete(f'/api/v1/youth-skills/{self.youth.id}/{self.skill.id}/')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(YouthSkill.objects.filter(youth=self.youth).exists())


class TrainingTests(CacheClearingTestCase):
    """Test training programs and enrolments"""

    def setUp(self):
        super().setUp()
        self.client = AuthenticatedAPIClient().authenticate_user(TestDataFactory.create_admin())
        self.youth = TestDataFactory.create_youth()
        self.program = TestDataFactory.create_program('Business Basics')

    def test_enrol_youth(self):
        response = self.client.post('/api/v1/youth-training/', {
            'youth': self.youth.id,
            'program': self.program.id,
            'start_date': '2024-02-01',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['program_name'], 'Business Basics')
        self.assertEqual(response.data['status'], 'In Progress')

    def test_completion_before_start_rejected(self):
        response = self.client.post('/api/v1/youth-training/', {
            'youth': self.youth.id,
            'program': self.program.id,
            'start_date': '2024-02-01',
            'completion_date': '2024-01-01',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_program_enrolment_count(self):
        TestDataFactory.create_enrolment(self.youth, self.program)
        response = self.client.get(f'/api/v1/training-programs/{self.program.id}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['enrolment_count'], 1)
