"""
Permission table maintenance.

These functions replace the old route-scanning scripts: the set of
permissions is derived from the static registry, so running them again
only fills in what is missing.
"""
import logging

from django.db import transaction

from backend.core.cache_utils import invalidate_role_permissions_cache
from .models import Permission, Role, RolePermission
from .registry import ADMIN_ROLE, DEFAULT_ROLES, DEFAULT_ROLE_GRANTS, all_pairs, describe

logger = logging.getLogger('backend.access')


def get_admin_role():
    display_name, description, is_system, is_editable = DEFAULT_ROLES[ADMIN_ROLE]
    role, created = Role.objects.get_or_create(
        name=ADMIN_ROLE,
        defaults={
            'display_name': display_name,
            'description': description,
            'is_system': is_system,
            'is_editable': is_editable,
        },
    )
    if created:
        logger.info("Created missing admin role")
    return role


@transaction.atomic
def generate_missing_permissions(dry_run=False):
    """
    Create every registry permission that does not exist yet and grant the
    admin role any permission it lacks.

    Returns:
        dict with admin_role_id, existing_permissions, missing_permissions,
        total_possible, created and admin_has
    """
    admin_role = get_admin_role()
    pairs = all_pairs()

    existing = set(Permission.objects.values_list('resource', 'action'))
    missing = [pair for pair in pairs if pair not in existing]

    created = 0
    if not dry_run:
        Permission.objects.bulk_create([
            Permission(resource=resource, action=action, description=describe(resource, action))
            for resource, action in missing
        ])
        created = len(missing)

    admin_pairs = set(
        RolePermission.objects.filter(role=admin_role).values_list('resource', 'action')
    )
    admin_missing = [pair for pair in pairs if pair not in admin_pairs]
    if not dry_run and admin_missing:
        RolePermission.objects.bulk_create([
            RolePermission(role=admin_role, resource=resource, action=action)
            for resource, action in admin_missing
        ])
        created += len(admin_missing)
        invalidate_role_permissions_cache(admin_role.name)

    admin_has = RolePermission.objects.filter(role=admin_role).count()
    logger.info(
        f"generate_missing_permissions: {len(missing)} missing permissions, "
        f"{len(admin_missing)} missing admin grants, created={created}"
    )
    return {
        'admin_role_id': admin_role.id,
        'existing_permissions': len(existing),
        'missing_permissions': len(missing),
        'total_possible': len(pairs),
        'created': created,
        'admin_has': admin_has,
    }


@transaction.atomic
def reset_admin_permissions():
    """Delete the admin role's grants and grant every known permission again"""
    admin_role = get_admin_role()
    removed, _ = RolePermission.objects.filter(role=admin_role).delete()

    # Make sure the permission table is complete before granting from it
    existing = set(Permission.objects.values_list('resource', 'action'))
    Permission.objects.bulk_create([
        Permission(resource=resource, action=action, description=describe(resource, action))
        for resource, action in all_pairs() if (resource, action) not in existing
    ])

    grants = [
        RolePermission(role=admin_role, resource=resource, action=action)
        for resource, action in Permission.objects.values_list('resource', 'action')
    ]
    RolePermission.objects.bulk_create(grants)
    invalidate_role_permissions_cache(admin_role.name)

    logger.info(f"Reset admin permissions: removed {removed}, granted {len(grants)}")
    return {
        'admin_role_id': admin_role.id,
        'removed': removed,
        'granted': len(grants),
    }


@transaction.atomic
def seed_default_roles():
    """Create the default roles and their baseline grants; existing rows are kept"""
    roles_created = 0
    grants_created = 0
    for name, (display_name, description, is_system, is_editable) in DEFAULT_ROLES.items():
        role, created = Role.objects.get_or_create(
            name=name,
            defaults={
                'display_name': display_name,
                'description': description,
                'is_system': is_system,
                'is_editable': is_editable,
            },
        )
        if created:
            roles_created += 1

        for resource, actions in DEFAULT_ROLE_GRANTS.get(name, {}).items():
            for action in actions:
                _, created = RolePermission.objects.get_or_create(
                    role=role, resource=resource, action=action
                )
                if created:
                    grants_created += 1

    invalidate_role_permissions_cache()
    return {'roles_created': roles_created, 'grants_created': grants_created}


@transaction.atomic
def apply_permission_changes(role, changes):
    """
    Apply a batch of grant/revoke changes to a role.

    Args:
        role: Role instance
        changes: iterable of dicts with resource, action and granted

    Returns:
        dict with the number of grants added and removed
    """
    added = 0
    removed = 0
    for change in changes:
        resource = change['resource']
        action = change['action']
        if change.get('granted'):
            _, created = RolePermission.objects.get_or_create(
                role=role, resource=resource, action=action
            )
            if created:
                added += 1
        else:
            deleted, _ = RolePermission.objects.filter(
                role=role, resource=resource, action=action
            ).delete()
            removed += deleted

    invalidate_role_permissions_cache(role.name)
    return {'added': added, 'removed': removed}
