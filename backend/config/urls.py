"""
URL configuration for the youth program backend.

Every app mounts its routes under /api/v1/.
"""
from django.contrib import admin
from django.urls import path, include, re_path
from django.conf import settings
from django.views.static import serve

admin.site.site_header = "Youth Program Admin Panel"
admin.site.site_title = "Youth Program Admin Portal"
admin.site.index_title = "Youth, Business and Mentorship Records"

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/', include('backend.core.urls')),
    path('api/v1/', include('backend.access.urls')),
    path('api/v1/', include('backend.youth.urls')),
    path('api/v1/', include('backend.businesses.urls')),
    path('api/v1/', include('backend.mentors.urls')),
    path('api/v1/', include('backend.feasibility.urls')),
    path('api/v1/', include('backend.makerspaces.urls')),
    path('api/v1/', include('backend.reports.urls')),
    re_path(r'^media/(?P<path>.*)$', serve, {'document_root': settings.MEDIA_ROOT}),
]
