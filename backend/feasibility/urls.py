from django.urls import path
from . import views

urlpatterns = [
    path('feasibility-assessments/', views.assessment_list_create, name='assessment-list-create'),
    path('feasibility-assessments/business/<int:business_id>/', views.assessments_by_business, name='assessments-by-business'),
    path('feasibility-assessments/<int:pk>/', views.assessment_detail, name='assessment-detail'),
    path('feasibility-assessments/<int:pk>/submit/', views.assessment_submit, name='assessment-submit'),
    path('feasibility-assessments/<int:pk>/review/', views.assessment_review, name='assessment-review'),
]
