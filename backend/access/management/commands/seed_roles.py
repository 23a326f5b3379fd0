from django.core.management.base import BaseCommand

from backend.access.registry import DEFAULT_ROLES
from backend.access.services import generate_missing_permissions, seed_default_roles


class Command(BaseCommand):
    help = 'Create the default roles (admin, manager, reviewer, mentor, mentee, user) with their baseline permissions'

    def handle(self, *args, **options):
        result = seed_default_roles()
        self.stdout.write(self.style.SUCCESS(f'✓ Roles created: {result["roles_created"]}'))
        self.stdout.write(self.style.SUCCESS(f'✓ Grants created: {result["grants_created"]}'))

        # Admin always gets the full registry
        summary = generate_missing_permissions()
        self.stdout.write(self.style.SUCCESS(
            f'✓ Admin role has {summary["admin_has"]} of {summary["total_possible"]} permissions'
        ))

        self.stdout.write(self.style.SUCCESS('\n=== Summary ==='))
        for name, (display_name, description, _, _) in DEFAULT_ROLES.items():
            self.stdout.write(f'  {name:<10} {display_name}: {description}')
