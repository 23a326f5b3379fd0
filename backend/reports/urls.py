from django.urls import path
from . import views

urlpatterns = [
    path('reports/youth-summary/', views.youth_summary, name='youth-summary'),
    path('reports/business-performance/', views.business_performance, name='business-performance'),
    path('reports/mentorship/', views.mentorship_summary, name='mentorship-summary'),
]
