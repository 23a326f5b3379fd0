from django.core.management.base import BaseCommand

from backend.access.services import generate_missing_permissions


class Command(BaseCommand):
    help = 'Create every registered permission that is missing and grant all of them to the admin role'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Report what is missing without writing anything',
        )

    def handle(self, *args, **options):
        dry_run = options['dry_run']
        result = generate_missing_permissions(dry_run=dry_run)

        self.stdout.write(f'Admin role id:         {result["admin_role_id"]}')
        self.stdout.write(f'Possible permissions:  {result["total_possible"]}')
        self.stdout.write(f'Existing permissions:  {result["existing_permissions"]}')
        self.stdout.write(f'Missing permissions:   {result["missing_permissions"]}')
        self.stdout.write(f'Admin grants:          {result["admin_has"]}')

        if dry_run:
            self.stdout.write(self.style.WARNING('Dry run: nothing was written'))
        elif result['created']:
            self.stdout.write(self.style.SUCCESS(f'✓ Created {result["created"]} records'))
        else:
            self.stdout.write(self.style.SUCCESS('✓ Permissions already complete'))
