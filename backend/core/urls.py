from django.urls import path
from .views import (
    CustomTokenObtainPairView, CustomTokenRefreshView, register, user_me,
    user_list_create, user_detail,
    setting_list_create, setting_detail,
    activity_list, activity_detail,
    dashboard_stats, global_search, clear_youth_data,
)

urlpatterns = [
    # Auth endpoints
    path('auth/register/', register, name='register'),
    path('auth/login/', CustomTokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('auth/refresh/', CustomTokenRefreshView.as_view(), name='token_refresh'),
    path('auth/me/', user_me, name='user-me'),

    # User endpoints
    path('users/', user_list_create, name='user-list-create'),
    path('users/<int:pk>/', user_detail, name='user-detail'),

    # Setting endpoints
    path('settings/', setting_list_create, name='setting-list-create'),
    path('settings/<int:pk>/', setting_detail, name='setting-detail'),

    # Activity log endpoints
    path('activities/', activity_list, name='activity-list'),
    path('activities/<int:pk>/', activity_detail, name='activity-detail'),

    path('dashboard/stats/', dashboard_stats, name='dashboard-stats'),
    path('search/', global_search, name='global-search'),
    path('admin/clear-youth-data/', clear_youth_data, name='clear-youth-data'),
]
