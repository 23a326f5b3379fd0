"""
Test utilities and factories for creating test data
"""
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from backend.access.models import Role, RolePermission
from backend.businesses.models import BusinessProfile, BusinessTracking, BusinessYouthRelationship
from backend.mentors.models import Mentor, MentorBusinessRelationship
from backend.youth.models import YouthProfile, Education, Skill, YouthSkill, TrainingProgram, YouthTraining
from django.core.cache import cache
from django.test import TestCase
from django.utils import timezone
import random
import string

User = get_user_model()


class TestDataFactory:
    """Factory class for creating test data"""

    @staticmethod
    def random_string(length=10):
        """Generate a random string"""
        return ''.join(random.choices(string.ascii_letters + string.digits, k=length))

    @staticmethod
    def create_user(username=None, email=None, password='testpass123', role='mentee', is_superuser=False, **extra):
        """Create a test user"""
        if not username:
            username = f'testuser_{TestDataFactory.random_string(6)}'
        if not email:
            email = f'{username}@test.com'
        return User.objects.create_user(
            username=username,
            email=email,
            password=password,
            role=role,
            is_superuser=is_superuser,
            **extra
        )

    @staticmethod
    def create_admin(username=None):
        return TestDataFactory.create_user(username=username, role='admin')

    @staticmethod
    def create_role(name=None, grants=None, **extra):
        """Create a role; `grants` is an iterable of (resource, action) pairs"""
        if not name:
            name = f'role_{TestDataFactory.random_string(6).lower()}'
        role = Role.objects.create(name=name, display_name=name.title(), **extra)
        for resource, action in grants or []:
            RolePermission.objects.create(role=role, resource=resource, action=action)
        return role

    @staticmethod
    def create_youth(full_name=None, participant_code=None, district='Bekwai', **extra):
        """Create a test youth profile"""
        if not full_name:
            full_name = f'Youth {TestDataFactory.random_string(6)}'
        return YouthProfile.objects.create(
            full_name=full_name,
            participant_code=participant_code,
            district=district,
            **extra
        )

    @staticmethod
    def create_education(youth, qualification_name='BECE', **extra):
        return Education.objects.create(
            youth=youth,
            qualification_type=extra.pop('qualification_type', 'Secondary'),
            qualification_name=qualification_name,
            **extra
        )

    @staticmethod
    def create_skill(name=None):
        if not name:
            name = f'Skill {TestDataFactory.random_string(6)}'
        return Skill.objects.create(name=name)

    @staticmethod
    def create_youth_skill(youth, skill=None, **extra):
        return YouthSkill.objects.create(youth=youth, skill=skill or TestDataFactory.create_skill(), **extra)

    @staticmethod
    def create_program(name=None, total_modules=4):
        """Create a test training program"""
        if not name:
            name = f'Program {TestDataFactory.random_string(6)}'
        return TrainingProgram.objects.create(name=name, total_modules=total_modules)

    @staticmethod
    def create_enrolment(youth, program=None, status='In Progress'):
        return YouthTraining.objects.create(
            youth=youth,
            program=program or TestDataFactory.create_program(),
            status=status,
        )

    @staticmethod
    def create_business(business_name=None, district='Bekwai', youth=None, **extra):
        """Create a test business, optionally linked to a youth as owner"""
        if not business_name:
            business_name = f'Business {TestDataFactory.random_string(6)}'
        business = BusinessProfile.objects.create(business_name=business_name, district=district, **extra)
        if youth is not None:
            BusinessYouthRelationship.objects.create(business=business, youth=youth, role='Owner')
        return business

    @staticmethod
    def create_tracking(business, recorded_by, tracking_date=None, actual_revenue=None, actual_employees=None, **extra):
        """Create a tracking record for a business"""
        tracking_date = tracking_date or timezone.localdate()
        return BusinessTracking.objects.create(
            business=business,
            recorded_by=recorded_by,
            tracking_date=tracking_date,
            tracking_month=tracking_date.replace(day=1),
            tracking_year=tracking_date.year,
            actual_revenue=actual_revenue,
            actual_employees=actual_employees,
            **extra
        )

    @staticmethod
    def create_mentor(user=None, name=None, **extra):
        """Create a mentor profile (and its user when none is given)"""
        if user is None:
            user = TestDataFactory.create_user(role='mentor')
        return Mentor.objects.create(user=user, name=name or user.full_name or user.username, **extra)

    @staticmethod
    def assign_mentor(mentor, business, **extra):
        return MentorBusinessRelationship.objects.create(mentor=mentor, business=business, **extra)


class AuthenticatedAPIClient(APIClient):
    """APIClient with authentication helper"""

    def authenticate_user(self, user):
        """Authenticate the client with a user"""
        refresh = RefreshToken.for_user(user)
        self.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
        return self

    def logout(self):
        """Remove authentication"""
        self.credentials()


class CacheClearingTestCase(TestCase):
    """TestCase that starts every test with an empty cache (permission sets, dashboard stats)"""

    def setUp(self):
        super().setUp()
        cache.clear()
