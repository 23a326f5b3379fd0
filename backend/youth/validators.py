"""
Validation helpers for youth records
"""
from rest_framework import serializers

from backend.core.models import DISTRICT_CHOICES, normalize_district

VALID_DISTRICTS = [choice[0] for choice in DISTRICT_CHOICES]


def validate_district_value(value):
    """
    Normalize and validate a district name.

    Accepts values carrying a ', Ghana' suffix. Blank values become None.
    """
    if value in (None, ''):
        return None
    district = normalize_district(value)
    if district not in VALID_DISTRICTS:
        raise serializers.ValidationError(
            f"Invalid district '{value}'. Must be one of: {', '.join(VALID_DISTRICTS)}"
        )
    return district


def validate_date_order(start, end, start_label, end_label):
    """Return an error dict when `end` precedes `start`, else an empty dict"""
    if start and end and end < start:
        return {end_label: f"{end_label.replace('_', ' ').capitalize()} cannot be before {start_label.replace('_', ' ')}"}
    return {}
