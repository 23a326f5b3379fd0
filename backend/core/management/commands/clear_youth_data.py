"""
Management command to clear youth profiles and all youth-dependent data
Usage: python manage.py clear_youth_data --confirm
"""
from django.core.management.base import BaseCommand, CommandError

from backend.core import maintenance


class Command(BaseCommand):
    help = 'Clear youth profiles, their businesses and every record that depends on them'

    def add_arguments(self, parser):
        parser.add_argument(
            '--confirm',
            action='store_true',
            help='Required; nothing is deleted without it',
        )

    def handle(self, *args, **options):
        counts = maintenance.count_youth_data()

        self.stdout.write('\nFound:')
        for label, count in counts.items():
            self.stdout.write(f'  - {label}: {count}')
        self.stdout.write('')

        if not options['confirm']:
            raise CommandError('Refusing to delete data without --confirm')

        self.stdout.write('Starting data cleanup...')
        try:
            deleted = maintenance.clear_youth_data()
        except Exception as e:
            raise CommandError(f'Error clearing youth data: {str(e)}')

        for label, count in deleted.items():
            self.stdout.write(self.style.SUCCESS(f'  ✓ {label}: {count} deleted'))
        self.stdout.write(self.style.SUCCESS(f'\nRemoved {sum(deleted.values())} rows.'))
