"""
Static permission registry.

Every (resource, action) pair the API can check is declared here. Views
refer to these names through ``HasResourcePermission`` and the permission
services derive the full permission table from ``RESOURCES`` x ``ACTIONS``.
"""

ACTIONS = ['view', 'create', 'edit', 'update', 'delete', 'manage']

RESOURCES = [
    'users',
    'roles',
    'permissions',
    'youth_profiles',
    'youth_education',
    'youth_certifications',
    'youth_skills',
    'portfolio',
    'education',
    'businesses',
    'business_youth',
    'business_makerspace',
    'feasibility_assessment',
    'business_tracking',
    'business_resources',
    'mentors',
    'mentor_assignments',
    'mentorship_messages',
    'business_advice',
    'training',
    'dashboard',
    'activities',
    'reports',
    'system_settings',
    'diagnostics',
    'uploads',
    'skills',
    'makerspaces',
    'certificates',
    'system',
    'admin_panel',
]

ADMIN_ROLE = 'admin'

# name -> (display_name, description, is_system, is_editable)
DEFAULT_ROLES = {
    'admin': ('Administrator', 'Full access to every resource', True, False),
    'manager': ('Program Manager', 'Manages program data and reports', True, True),
    'reviewer': ('Reviewer', 'Reviews assessments and tracking records', True, True),
    'mentor': ('Mentor', 'Mentors assigned businesses', True, True),
    'mentee': ('Mentee', 'Program participant', True, True),
    'user': ('User', 'Basic read access', True, True),
}

_READ = ['view']
_WRITE = ['view', 'create', 'edit', 'update']

# Baseline grants for the non-admin roles. Admin is granted everything.
DEFAULT_ROLE_GRANTS = {
    'manager': {
        'youth_profiles': _WRITE + ['delete'],
        'youth_education': _WRITE + ['delete'],
        'youth_certifications': _WRITE + ['delete'],
        'youth_skills': _WRITE + ['delete'],
        'education': _WRITE + ['delete'],
        'businesses': _WRITE + ['delete'],
        'business_youth': _WRITE + ['delete'],
        'business_makerspace': _WRITE + ['delete'],
        'business_tracking': _WRITE,
        'business_resources': _WRITE + ['delete'],
        'feasibility_assessment': _WRITE,
        'mentors': _WRITE,
        'mentor_assignments': _WRITE + ['delete'],
        'training': _WRITE + ['delete'],
        'skills': _WRITE,
        'makerspaces': _WRITE,
        'dashboard': _READ,
        'reports': _READ,
        'activities': _READ,
    },
    'reviewer': {
        'youth_profiles': _READ,
        'businesses': _READ,
        'business_tracking': _READ + ['update'],
        'feasibility_assessment': _READ + ['update'],
        'dashboard': _READ,
        'reports': _READ,
    },
    'mentor': {
        'youth_profiles': _READ,
        'education': _READ,
        'businesses': _READ,
        'business_tracking': _WRITE,
        'business_resources': _READ,
        'feasibility_assessment': _WRITE,
        'mentor_assignments': _READ,
        'mentorship_messages': _WRITE,
        'business_advice': _WRITE,
        'dashboard': _READ,
    },
    'mentee': {
        'youth_profiles': _READ,
        'businesses': _READ,
        'mentorship_messages': ['view', 'create'],
        'business_advice': _READ,
    },
    'user': {
        'dashboard': _READ,
    },
}


def is_registered(resource, action):
    return resource in RESOURCES and action in ACTIONS


def all_pairs():
    """Every declared (resource, action) pair, in registry order"""
    return [(resource, action) for resource in RESOURCES for action in ACTIONS]


def describe(resource, action):
    return f"{action} {resource.replace('_', ' ')}"
