from django.urls import path
from . import views

urlpatterns = [
    path('mentors/', views.mentor_list_create, name='mentor-list-create'),
    path('mentors/<int:pk>/', views.mentor_detail, name='mentor-detail'),
    path('mentor-businesses/', views.assignment_list_create, name='assignment-list-create'),
    path('mentor-businesses/detailed/', views.assignment_detailed_list, name='assignment-detailed-list'),
    path('mentor-businesses/mentor/<int:mentor_id>/', views.assignments_by_mentor, name='assignments-by-mentor'),
    path('mentor-businesses/business/<int:business_id>/', views.assignments_by_business, name='assignments-by-business'),
    path('mentor-businesses/mentor/<int:mentor_id>/business/<int:business_id>/', views.assignment_delete_pair,
         name='assignment-delete-pair'),
    path('mentor-businesses/<int:pk>/', views.assignment_detail, name='assignment-detail'),
    path('mentorship-messages/', views.message_list_create, name='message-list-create'),
    path('mentorship-messages/<int:pk>/read/', views.message_mark_read, name='message-mark-read'),
    path('business-advice/', views.advice_list_create, name='advice-list-create'),
    path('business-advice/<int:pk>/', views.advice_detail, name='advice-detail'),
]
