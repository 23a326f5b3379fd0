from django.urls import path
from . import views

urlpatterns = [
    path('businesses/', views.business_list_create, name='business-list-create'),
    path('businesses/<int:pk>/', views.business_detail, name='business-detail'),
    path('businesses/<int:pk>/members/', views.business_members, name='business-members'),
    path('businesses/<int:pk>/members/<int:youth_id>/', views.business_member_detail, name='business-member-detail'),
    path('businesses/<int:pk>/tracking/', views.business_tracking_list, name='business-tracking-list'),
    path('businesses/<int:pk>/stats/', views.business_stats, name='business-stats'),
    path('businesses/<int:pk>/resources/', views.business_resources, name='business-resources'),
    path('businesses/<int:pk>/resource-stats/', views.business_resource_stats, name='business-resource-stats'),
    path('youth-profiles/<int:youth_id>/businesses/', views.youth_businesses, name='youth-businesses'),
    path('business-tracking/', views.tracking_list_create, name='tracking-list-create'),
    path('business-tracking/<int:pk>/', views.tracking_detail, name='tracking-detail'),
    path('business-tracking/<int:pk>/verify/', views.tracking_verify, name='tracking-verify'),
    path('business-tracking/<int:pk>/attachments/', views.tracking_attachments, name='tracking-attachments'),
    path('business-tracking/attachments/<int:pk>/', views.tracking_attachment_delete, name='tracking-attachment-delete'),
    path('business-resources/<int:pk>/', views.business_resource_detail, name='business-resource-detail'),
    path('business-resources/<int:pk>/costs/', views.resource_costs, name='resource-costs'),
    path('business-resource-costs/<int:pk>/', views.resource_cost_delete, name='resource-cost-delete'),
]
