import logging

from django.db import IntegrityError, transaction
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from backend.access.permissions import HasResourceAccess
from backend.core.cache_utils import invalidate_dashboard_cache
from backend.core.utils import create_audit_log, error_response_data
from .filters import YouthProfileFilter
from .models import YouthProfile, Education, Certification, Skill, YouthSkill, TrainingProgram, YouthTraining
from .serializers import (
    YouthProfileSerializer, YouthProfileListSerializer, YouthProfileDetailSerializer,
    EducationSerializer, EducationBatchItemSerializer, CertificationSerializer,
    SkillSerializer, YouthSkillSerializer, TrainingProgramSerializer, YouthTrainingSerializer
)

logger = logging.getLogger('backend.youth')


def _participant_code_taken(code, exclude_pk=None):
    if not code:
        return False
    queryset = YouthProfile.objects.filter(participant_code=code)
    if exclude_pk:
        queryset = queryset.exclude(pk=exclude_pk)
    return queryset.exists()


# Youth profile views
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('youth_profiles')])
def youth_profile_list_create(request):
    """List youth profiles or create a new one"""
    if request.method == 'GET':
        queryset = YouthProfile.objects.all()
        if request.query_params.get('include_deleted') != 'true':
            queryset = queryset.filter(is_deleted=False)
        filterset = YouthProfileFilter(request.query_params, queryset=queryset)
        if not filterset.is_valid():
            return Response(filterset.errors, status=status.HTTP_400_BAD_REQUEST)
        serializer = YouthProfileListSerializer(filterset.qs, many=True)
        return Response(serializer.data)

    serializer = YouthProfileSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    code = serializer.validated_data.get('participant_code')
    if _participant_code_taken(code):
        return Response({'error': f"A youth profile with participant code '{code}' already exists"},
                        status=status.HTTP_409_CONFLICT)

    try:
        with transaction.atomic():
            youth = serializer.save()
    except IntegrityError as e:
        logger.warning(f"Youth profile creation conflict: {str(e)}")
        return Response({'error': 'A youth profile with this participant code already exists'},
                        status=status.HTTP_409_CONFLICT)

    logger.info(f"Youth profile created: {youth.id} ({youth.full_name}) by {request.user.username}")
    create_audit_log(request, 'create', 'YouthProfile', youth.id, object_name=youth.full_name)
    invalidate_dashboard_cache()
    return Response(YouthProfileSerializer(youth).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess('youth_profiles')])
def youth_profile_detail(request, pk):
    """Retrieve, update or delete a youth profile"""
    youth = get_object_or_404(YouthProfile, pk=pk)

    if request.method == 'GET':
        return Response(YouthProfileSerializer(youth).data)

    if request.method == 'DELETE':
        name = youth.full_name
        # Education, certifications, skills, training and memberships cascade
        youth.delete()
        logger.info(f"Youth profile deleted: {pk} ({name}) by {request.user.username}")
        create_audit_log(request, 'delete', 'YouthProfile', pk, object_name=name)
        invalidate_dashboard_cache()
        return Response(status=status.HTTP_204_NO_CONTENT)

    serializer = YouthProfileSerializer(youth, data=request.data, partial=request.method == 'PATCH')
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    code = serializer.validated_data.get('participant_code')
    if _participant_code_taken(code, exclude_pk=youth.pk):
        return Response({'error': f"A youth profile with participant code '{code}' already exists"},
                        status=status.HTTP_409_CONFLICT)

    try:
        with transaction.atomic():
            serializer.save()
    except IntegrityError as e:
        logger.warning(f"Youth profile {pk} update conflict: {str(e)}")
        return Response({'error': 'A youth profile with this participant code already exists'},
                        status=status.HTTP_409_CONFLICT)

    create_audit_log(request, 'update', 'YouthProfile', youth.id, changes=request.data, object_name=youth.full_name)
    invalidate_dashboard_cache()
    return Response(serializer.data)


@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourceAccess('youth_profiles')])
def youth_profile_details(request, pk):
    """Youth profile with its education, certifications, skills, training and businesses"""
    youth = get_object_or_404(
        YouthProfile.objects.prefetch_related('education', 'certifications', 'youth_skills__skill', 'training__program'),
        pk=pk
    )
    return Response(YouthProfileDetailSerializer(youth).data)


# Education views
@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourceAccess('education')])
def education_by_youth(request, youth_id):
    """List education records of a youth"""
    youth = get_object_or_404(YouthProfile, pk=youth_id)
    records = Education.objects.filter(youth=youth)
    return Response(EducationSerializer(records, many=True).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated, HasResourceAccess('education')])
def education_record(request, pk):
    record = get_object_or_404(Education, pk=pk)
    return Response(EducationSerializer(record).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('education')])
def education_create(request):
    """Add an education record to a youth"""
    serializer = EducationSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    record = serializer.save()
    create_audit_log(request, 'create', 'Education', record.id, object_name=record.qualification_name)
    return Response(EducationSerializer(record).data, status=status.HTTP_201_CREATED)


@api_view(['PATCH'])
@permission_classes([IsAuthenticated, HasResourceAccess('education')])
def education_update(request, pk):
    record = get_object_or_404(Education, pk=pk)
    serializer = EducationSerializer(record, data=request.data, partial=True)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    serializer.save()
    create_audit_log(request, 'update', 'Education', record.id, changes=request.data, object_name=record.qualification_name)
    return Response(serializer.data)


@api_view(['DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess('education')])
def education_delete(request, pk):
    record = get_object_or_404(Education, pk=pk)
    record.delete()
    create_audit_log(request, 'delete', 'Education', pk)
    return Response({'message': 'Education record deleted successfully', 'id': pk})


@api_view(['POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('education', {'POST': 'edit'})])
def education_batch(request, youth_id):
    """Replace all education records of a youth with the submitted list"""
    youth = get_object_or_404(YouthProfile, pk=youth_id)
    items = request.data.get('education', request.data) if isinstance(request.data, dict) else request.data
    if not isinstance(items, list):
        return Response({'error': 'Expected a list of education records'}, status=status.HTTP_400_BAD_REQUEST)

    serializer = EducationBatchItemSerializer(data=items, many=True)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        with transaction.atomic():
            removed, _ = Education.objects.filter(youth=youth).delete()
            records = [Education.objects.create(youth=youth, **item) for item in serializer.validated_data]
    except Exception as e:
        logger.error(f"Education batch update failed for youth {youth_id}: {str(e)}", exc_info=True)
        return Response(error_response_data('Failed to update education records', e),
                        status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    create_audit_log(request, 'update', 'Education', youth.id,
                     changes={'removed': removed, 'created': len(records)}, object_name=youth.full_name)
    return Response(EducationSerializer(records, many=True).data, status=status.HTTP_201_CREATED)


# Certification views
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('youth_certifications')])
def certification_list_create(request):
    if request.method == 'GET':
        certifications = Certification.objects.all()
        youth_id = request.query_params.get('youth')
        if youth_id:
            certifications = certifications.filter(youth_id=youth_id)
        return Response(CertificationSerializer(certifications, many=True).data)

    serializer = CertificationSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    certification = serializer.save()
    create_audit_log(request, 'create', 'Certification', certification.id, object_name=certification.certification_name)
    return Response(serializer.data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess('youth_certifications')])
def certification_detail(request, pk):
    certification = get_object_or_404(Certification, pk=pk)

    if request.method == 'GET':
        return Response(CertificationSerializer(certification).data)
    elif request.method == 'PATCH':
        serializer = CertificationSerializer(certification, data=request.data, partial=True)
        if serializer.is_valid():
            serializer.save()
            return Response(serializer.data)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    else:  # DELETE
        certification.delete()
        create_audit_log(request, 'delete', 'Certification', pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


# Skill catalog views
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('skills')])
def skill_list_create(request):
    if request.method == 'GET':
        skills = Skill.objects.all()
        if request.query_params.get('active') == 'true':
            skills = skills.filter(is_active=True)
        return Response(SkillSerializer(skills, many=True).data)

    serializer = SkillSerializer(data=request.data)
    if serializer.is_valid():
        skill = serializer.save()
        return Response(SkillSerializer(skill).data, status=status.HTTP_201_CREATED)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess('skills')])
def skill_detail(request, pk):
    skill = get_object_or_404(Skill, pk=pk)

    if request.method == 'GET':
        return Response(SkillSerializer(skill).data)
    elif request.method in ('PUT', 'PATCH'):
        serializer = SkillSerializer(skill, data=request.data, partial=request.method == 'PATCH')
        if serializer.is_valid():
            serializer.save()
            return Response(serializer.data)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    else:  # DELETE
        skill.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)


# Youth skill views
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('youth_skills')])
def youth_skill_list_create(request, youth_id):
    """List or add the skills of a youth"""
    youth = get_object_or_404(YouthProfile, pk=youth_id)

    if request.method == 'GET':
        skills = YouthSkill.objects.filter(youth=youth).select_related('skill')
        return Response(YouthSkillSerializer(skills, many=True).data)

    serializer = YouthSkillSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    skill = serializer.validated_data['skill']
    if YouthSkill.objects.filter(youth=youth, skill=skill).exists():
        return Response({'error': f"Youth already has skill '{skill.name}'"}, status=status.HTTP_409_CONFLICT)

    youth_skill = serializer.save(youth=youth)
    create_audit_log(request, 'create', 'YouthSkill', youth_skill.id, object_name=f"{youth.full_name}: {skill.name}")
    return Response(YouthSkillSerializer(youth_skill).data, status=status.HTTP_201_CREATED)


@api_view(['PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess('youth_skills')])
def youth_skill_detail(request, youth_id, skill_id):
    youth_skill = get_object_or_404(YouthSkill, youth_id=youth_id, skill_id=skill_id)

    if request.method == 'DELETE':
        youth_skill.delete()
        create_audit_log(request, 'delete', 'YouthSkill', f"{youth_id}:{skill_id}")
        return Response(status=status.HTTP_204_NO_CONTENT)

    data = request.data.copy()
    data.pop('skill', None)
    serializer = YouthSkillSerializer(youth_skill, data=data, partial=True)
    if serializer.is_valid():
        serializer.save()
        return Response(serializer.data)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


# Training program views
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('training')])
def training_program_list_create(request):
    if request.method == 'GET':
        programs = TrainingProgram.objects.all()
        category = request.query_params.get('category')
        if category:
            programs = programs.filter(category=category)
        return Response(TrainingProgramSerializer(programs, many=True).data)

    serializer = TrainingProgramSerializer(data=request.data)
    if serializer.is_valid():
        program = serializer.save()
        create_audit_log(request, 'create', 'TrainingProgram', program.id, object_name=program.name)
        return Response(TrainingProgramSerializer(program).data, status=status.HTTP_201_CREATED)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess('training')])
def training_program_detail(request, pk):
    program = get_object_or_404(TrainingProgram, pk=pk)

    if request.method == 'GET':
        return Response(TrainingProgramSerializer(program).data)
    elif request.method in ('PUT', 'PATCH'):
        serializer = TrainingProgramSerializer(program, data=request.data, partial=request.method == 'PATCH')
        if serializer.is_valid():
            serializer.save()
            return Response(serializer.data)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    else:  # DELETE
        program.delete()
        create_audit_log(request, 'delete', 'TrainingProgram', pk, object_name=program.name)
        invalidate_dashboard_cache()
        return Response(status=status.HTTP_204_NO_CONTENT)


# Youth training views
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, HasResourceAccess('training')])
def youth_training_list_create(request):
    """List enrolments (filter by youth or program) or enrol a youth"""
    if request.method == 'GET':
        enrolments = YouthTraining.objects.select_related('youth', 'program')
        youth_id = request.query_params.get('youth')
        program_id = request.query_params.get('program')
        status_filter = request.query_params.get('status')
        if youth_id:
            enrolments = enrolments.filter(youth_id=youth_id)
        if program_id:
            enrolments = enrolments.filter(program_id=program_id)
        if status_filter:
            enrolments = enrolments.filter(status=status_filter)
        return Response(YouthTrainingSerializer(enrolments, many=True).data)

    serializer = YouthTrainingSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    enrolment = serializer.save()
    create_audit_log(request, 'create', 'YouthTraining', enrolment.id, object_name=str(enrolment))
    invalidate_dashboard_cache()
    return Response(YouthTrainingSerializer(enrolment).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, HasResourceAccess('training')])
def youth_training_detail(request, pk):
    enrolment = get_object_or_404(YouthTraining, pk=pk)

    if request.method == 'GET':
        return Response(YouthTrainingSerializer(enrolment).data)
    elif request.method in ('PUT', 'PATCH'):
        serializer = YouthTrainingSerializer(enrolment, data=request.data, partial=request.method == 'PATCH')
        if serializer.is_valid():
            serializer.save()
            create_audit_log(request, 'update', 'YouthTraining', enrolment.id, changes=request.data)
            return Response(serializer.data)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    else:  # DELETE
        enrolment.delete()
        create_audit_log(request, 'delete', 'YouthTraining', pk)
        invalidate_dashboard_cache()
        return Response(status=status.HTTP_204_NO_CONTENT)
