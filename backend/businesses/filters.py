import django_filters
from django.db.models import Q
from .models import BusinessProfile, BusinessTracking


class BusinessProfileFilter(django_filters.FilterSet):
    district = django_filters.CharFilter(field_name='district')
    dare_model = django_filters.CharFilter(field_name='dare_model')
    sector = django_filters.CharFilter(field_name='sector')
    registration_status = django_filters.CharFilter(field_name='registration_status')
    youth = django_filters.NumberFilter(field_name='youth_relationships__youth_id')
    search = django_filters.CharFilter(method='filter_search')

    class Meta:
        model = BusinessProfile
        fields = ['district', 'dare_model', 'sector', 'registration_status']

    def filter_search(self, queryset, name, value):
        if not value:
            return queryset
        return queryset.filter(
            Q(business_name__icontains=value) |
            Q(business_location__icontains=value) |
            Q(enterprise_owner_name__icontains=value)
        )


class BusinessTrackingFilter(django_filters.FilterSet):
    """Filter tracking records by business, period, date range and verification"""
    business = django_filters.NumberFilter(field_name='business_id')
    mentor = django_filters.NumberFilter(field_name='mentor_id')
    tracking_period = django_filters.CharFilter(field_name='tracking_period')
    tracking_year = django_filters.NumberFilter(field_name='tracking_year')
    is_verified = django_filters.BooleanFilter(field_name='is_verified')
    date_from = django_filters.DateFilter(field_name='tracking_date', lookup_expr='gte')
    date_to = django_filters.DateFilter(field_name='tracking_date', lookup_expr='lte')

    class Meta:
        model = BusinessTracking
        fields = ['business', 'mentor', 'tracking_period', 'tracking_year', 'is_verified']
