from django.urls import path
from . import views

urlpatterns = [
    path('roles/', views.role_list_create, name='role-list-create'),
    path('roles/<int:pk>/', views.role_detail, name='role-detail'),
    path('permissions/', views.permission_list, name='permission-list'),
    path('permissions/me/', views.my_permissions, name='my-permissions'),
    path('role-permissions/', views.role_permission_add, name='role-permission-add'),
    path('role-permissions/remove/', views.role_permission_remove, name='role-permission-remove'),
    path('role-permissions/batch/', views.role_permission_batch, name='role-permission-batch'),
    path('role-permissions/resources-actions/', views.resources_actions, name='resources-actions'),
    path('role-permissions/<str:role_name>/', views.role_permission_list, name='role-permission-list'),
    path('admin/permissions-control/generate-missing-permissions/', views.generate_missing_permissions,
         name='generate-missing-permissions'),
    path('admin/permissions-control/reset-permissions/', views.reset_permissions, name='reset-permissions'),
]
