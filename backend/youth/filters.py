import django_filters
from django.db.models import Q
from .models import YouthProfile


class YouthProfileFilter(django_filters.FilterSet):
    """Filter youth profiles by district, model, gender and free-text search"""
    district = django_filters.CharFilter(field_name='district')
    dare_model = django_filters.CharFilter(field_name='dare_model')
    gender = django_filters.CharFilter(field_name='gender', lookup_expr='iexact')
    cohort = django_filters.CharFilter(field_name='cohort')
    search = django_filters.CharFilter(method='filter_search')

    class Meta:
        model = YouthProfile
        fields = ['district', 'dare_model', 'gender', 'cohort']

    def filter_search(self, queryset, name, value):
        if not value:
            return queryset
        return queryset.filter(
            Q(full_name__icontains=value) |
            Q(participant_code__icontains=value) |
            Q(phone_number__icontains=value) |
            Q(town__icontains=value)
        )
