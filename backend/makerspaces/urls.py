from django.urls import path
from . import views

urlpatterns = [
    path('makerspaces/', views.makerspace_list_create, name='makerspace-list-create'),
    path('makerspaces/<int:pk>/', views.makerspace_detail, name='makerspace-detail'),
    path('makerspaces/<int:pk>/businesses/', views.makerspace_businesses, name='makerspace-businesses'),
    path('business-makerspace/<int:pk>/', views.assignment_delete, name='business-makerspace-delete'),
]
