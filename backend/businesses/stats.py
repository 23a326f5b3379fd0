"""
Business performance statistics computed from tracking records
"""
from decimal import Decimal, ROUND_FLOOR

from django.db.models import Count, DecimalField, ExpressionWrapper, F, Sum

from .models import BusinessResource, BusinessTracking


def round_half_up(value, digits=1):
    """
    Round to `digits` decimals with halves going up (28.75 -> 28.8, -2.25 -> -2.2).

    Works on Decimal so halves that binary floats cannot represent are kept exact.
    """
    step = Decimal(1).scaleb(-digits)
    value = Decimal(str(value)) if not isinstance(value, Decimal) else value
    return float((value / step + Decimal('0.5')).to_integral_value(rounding=ROUND_FLOOR) * step)


def growth_rate(latest, previous):
    """
    Percentage change between two revenue figures.

    Returns 0.0 when there is no previous figure or it is not positive.
    """
    if previous is None or previous <= 0:
        return 0.0
    latest = latest or 0
    return round_half_up(Decimal(latest - previous) / Decimal(previous) * 100, 1)


def business_tracking_stats(business):
    """
    Summarize a business's tracking records.

    The latest record (by tracking date) gives the current revenue and head
    count. Growth compares it with the most recent record from a different
    calendar month.
    """
    records = list(
        BusinessTracking.objects.filter(business=business).order_by('-tracking_date', '-id')
    )
    stats = {
        'business_id': business.id,
        'latest_revenue': 0,
        'current_employees': 0,
        'growth_rate': 0.0,
        'revenue_timeline': [],
        'employees_timeline': [],
        'record_count': len(records),
    }
    if not records:
        return stats

    latest = records[0]
    stats['latest_revenue'] = latest.actual_revenue or 0
    stats['current_employees'] = latest.actual_employees or 0

    previous = next(
        (
            record for record in records[1:]
            if (record.tracking_date.year, record.tracking_date.month)
            != (latest.tracking_date.year, latest.tracking_date.month)
        ),
        None,
    )
    if previous is not None:
        stats['growth_rate'] = growth_rate(stats['latest_revenue'], previous.actual_revenue)

    # Timelines run oldest to newest
    for record in reversed(records):
        point = {
            'date': record.tracking_date.isoformat(),
            'month': record.tracking_month.isoformat() if record.tracking_month else None,
        }
        stats['revenue_timeline'].append({**point, 'value': record.actual_revenue or 0})
        stats['employees_timeline'].append({**point, 'value': record.actual_employees or 0})
    return stats


def business_resource_stats(business):
    """Resource counts by status and category, and the total stock value"""
    resources = BusinessResource.objects.filter(business=business)

    count_by_status = {
        row['status']: row['count']
        for row in resources.values('status').annotate(count=Count('id')).order_by('status')
    }
    count_by_category = {
        row['category']: row['count']
        for row in resources.values('category').annotate(count=Count('id')).order_by('category')
    }
    total_value = resources.filter(unit_cost__isnull=False).aggregate(
        total=Sum(
            ExpressionWrapper(F('unit_cost') * F('quantity'), output_field=DecimalField(max_digits=14, decimal_places=2))
        )
    )['total'] or Decimal('0.00')

    return {
        'business_id': business.id,
        'total_resources': resources.count(),
        'count_by_status': count_by_status,
        'count_by_category': count_by_category,
        'total_value': float(total_value),
    }
