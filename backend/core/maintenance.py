"""
Bulk maintenance operations shared by management commands and admin endpoints
"""
import logging

from django.apps import apps
from django.db import transaction

from .cache_signals import suspend_cache_signals
from .cache_utils import invalidate_dashboard_cache

logger = logging.getLogger('backend.core')

# Children before parents so no foreign key is left dangling mid-transaction
YOUTH_DATA_MODELS = [
    'feasibility.FeasibilityAssessment',
    'mentors.BusinessAdvice',
    'mentors.MentorshipMessage',
    'mentors.MentorBusinessRelationship',
    'makerspaces.BusinessMakerspaceAssignment',
    'businesses.BusinessResourceCost',
    'businesses.BusinessResource',
    'businesses.BusinessTrackingAttachment',
    'businesses.BusinessTracking',
    'businesses.BusinessYouthRelationship',
    'businesses.BusinessProfile',
    'youth.YouthTraining',
    'youth.YouthSkill',
    'youth.Certification',
    'youth.Education',
    'youth.YouthProfile',
]


def count_youth_data():
    return {label: apps.get_model(label).objects.count() for label in YOUTH_DATA_MODELS}


def clear_youth_data():
    """
    Delete every youth profile and all data hanging off it in one transaction.

    Users, roles, mentors, skills, training programs and makerspaces are kept.
    Returns {model_label: deleted_row_count}.
    """
    deleted = {}
    with suspend_cache_signals():
        with transaction.atomic():
            for label in YOUTH_DATA_MODELS:
                _, per_model = apps.get_model(label).objects.all().delete()
                deleted[label] = per_model.get(label, 0)
    invalidate_dashboard_cache()
    logger.warning(f"Youth data cleared: {sum(deleted.values())} rows removed")
    return deleted
