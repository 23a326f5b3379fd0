from django.urls import path
from . import views

urlpatterns = [
    path('youth-profiles/', views.youth_profile_list_create, name='youth-profile-list-create'),
    path('youth-profiles/<int:pk>/', views.youth_profile_detail, name='youth-profile-detail'),
    path('youth-profiles/<int:pk>/details/', views.youth_profile_details, name='youth-profile-details'),
    path('education/', views.education_create, name='education-create'),
    path('education/record/<int:pk>/', views.education_record, name='education-record'),
    path('education/<int:pk>/update/', views.education_update, name='education-update'),
    path('education/<int:pk>/delete/', views.education_delete, name='education-delete'),
    path('education/<int:youth_id>/', views.education_by_youth, name='education-by-youth'),
    path('education/<int:youth_id>/batch/', views.education_batch, name='education-batch'),
    path('certifications/', views.certification_list_create, name='certification-list-create'),
    path('certifications/<int:pk>/', views.certification_detail, name='certification-detail'),
    path('skills/', views.skill_list_create, name='skill-list-create'),
    path('skills/<int:pk>/', views.skill_detail, name='skill-detail'),
    path('youth-skills/<int:youth_id>/', views.youth_skill_list_create, name='youth-skill-list-create'),
    path('youth-skills/<int:youth_id>/<int:skill_id>/', views.youth_skill_detail, name='youth-skill-detail'),
    path('training-programs/', views.training_program_list_create, name='training-program-list-create'),
    path('training-programs/<int:pk>/', views.training_program_detail, name='training-program-detail'),
    path('youth-training/', views.youth_training_list_create, name='youth-training-list-create'),
    path('youth-training/<int:pk>/', views.youth_training_detail, name='youth-training-detail'),
]
