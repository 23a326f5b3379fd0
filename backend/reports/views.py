import logging
from datetime import datetime

from django.db.models import Count, OuterRef, Q, Subquery
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from backend.access.permissions import HasResourcePermission
from backend.businesses.models import BusinessProfile, BusinessTracking
from backend.mentors.models import Mentor
from backend.youth.models import YouthProfile, YouthTraining

logger = logging.getLogger('backend.reports')


def _parse_date(value):
    return datetime.strptime(value, '%Y-%m-%d').date() if value else None


def _count_by(queryset, field):
    """Rows grouped by `field` as a {value: count} dict; empty values are 'Unknown'"""
    rows = queryset.values(field).annotate(count=Count('id')).order_by(field)
    return {(row[field] or 'Unknown'): row['count'] for row in rows}


@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourcePermission('reports', 'view')])
def youth_summary(request):
    """Youth counts by district, gender, DARE model and training status"""
    youth = YouthProfile.objects.filter(is_deleted=False)
    district = request.query_params.get('district')
    cohort = request.query_params.get('cohort')
    if district:
        youth = youth.filter(district=district)
    if cohort:
        youth = youth.filter(cohort=cohort)

    enrolments = YouthTraining.objects.filter(youth__in=youth)

    return Response({
        'filters': {'district': district, 'cohort': cohort},
        'summary': {
            'total_youth': youth.count(),
            'with_business': youth.filter(business_relationships__is_active=True).distinct().count(),
            'refugees': youth.filter(refugee_status=True).count(),
            'total_enrolments': enrolments.count(),
        },
        'by_district': _count_by(youth, 'district'),
        'by_gender': _count_by(youth, 'gender'),
        'by_dare_model': _count_by(youth, 'dare_model'),
        'training_by_status': _count_by(enrolments, 'status'),
    })


@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourcePermission('reports', 'view')])
def business_performance(request):
    """Latest revenue and head count per business within an optional date range"""
    try:
        date_from = _parse_date(request.query_params.get('date_from'))
        date_to = _parse_date(request.query_params.get('date_to'))
    except ValueError:
        return Response({'error': 'Dates must use the YYYY-MM-DD format'}, status=status.HTTP_400_BAD_REQUEST)

    records = BusinessTracking.objects.all()
    if date_from:
        records = records.filter(tracking_date__gte=date_from)
    if date_to:
        records = records.filter(tracking_date__lte=date_to)

    latest = records.filter(business=OuterRef('pk')).order_by('-tracking_date', '-id')
    businesses = BusinessProfile.objects.annotate(
        record_count=Count('tracking_records', filter=Q(tracking_records__in=records)),
        latest_revenue=Subquery(latest.values('actual_revenue')[:1]),
        latest_employees=Subquery(latest.values('actual_employees')[:1]),
        latest_tracking_date=Subquery(latest.values('tracking_date')[:1]),
    )
    district = request.query_params.get('district')
    if district:
        businesses = businesses.filter(district=district)

    rows = [
        {
            'business_id': b.id,
            'business_name': b.business_name,
            'district': b.district,
            'record_count': b.record_count,
            'latest_revenue': b.latest_revenue or 0,
            'latest_employees': b.latest_employees or 0,
            'latest_tracking_date': b.latest_tracking_date.isoformat() if b.latest_tracking_date else None,
        }
        for b in businesses.order_by('business_name')
    ]

    return Response({
        'period': {
            'from': date_from.isoformat() if date_from else None,
            'to': date_to.isoformat() if date_to else None,
        },
        'summary': {
            'total_businesses': len(rows),
            'businesses_tracked': sum(1 for row in rows if row['record_count']),
            'total_latest_revenue': sum(row['latest_revenue'] for row in rows),
            'total_employees': sum(row['latest_employees'] for row in rows),
        },
        'businesses': rows,
    })


@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourcePermission('reports', 'view')])
def mentorship_summary(request):
    """Active assignments per mentor"""
    mentors = Mentor.objects.annotate(
        active_assignments=Count('business_relationships', filter=Q(business_relationships__is_active=True)),
        total_assignments=Count('business_relationships'),
    ).order_by('-active_assignments', 'name')

    return Response({
        'summary': {
            'total_mentors': mentors.count(),
            'active_mentors': mentors.filter(is_active=True).count(),
            'unassigned_businesses': BusinessProfile.objects.exclude(
                mentor_relationships__is_active=True
            ).count(),
        },
        'mentors': [
            {
                'mentor_id': m.id,
                'name': m.name,
                'district': m.assigned_district,
                'is_active': m.is_active,
                'active_assignments': m.active_assignments,
                'total_assignments': m.total_assignments,
            }
            for m in mentors
        ],
    })
