"""
Management command to populate Nepali calendar data
Usage: python manage.py populate_calendar
"""
from django.core.management.base import BaseCommand, CommandError
from django.db import models, transaction

from bikram_sambat.bsdate import BSDate
from bikram_sambat.calendar_data import MAX_YEAR, MIN_YEAR, days_in_month, days_in_year, is_supported_year
from bikram_sambat.exceptions import MissingCalendarDataError
from bikram_sambat.models import NepaliCalendar


class Command(BaseCommand):
    help = 'Populate Nepali calendar data for BS years'

    def add_arguments(self, parser):
        parser.add_argument(
            '--start-year',
            type=int,
            default=MIN_YEAR,
            help=f'Starting BS year (default: {MIN_YEAR})'
        )
        parser.add_argument(
            '--end-year',
            type=int,
            default=MAX_YEAR,
            help=f'Ending BS year (default: {MAX_YEAR})'
        )
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing calendar data before populating'
        )

    def handle(self, *args, **options):
        start_year = options['start_year']
        end_year = options['end_year']
        clear_existing = options['clear']

        if start_year > end_year:
            raise CommandError(f'--start-year ({start_year}) is after --end-year ({end_year})')

        if clear_existing:
            self.stdout.write(self.style.WARNING('Clearing existing calendar data...'))
            NepaliCalendar.objects.all().delete()

        self.stdout.write(f'Populating calendar data for BS years {start_year}-{end_year}...')

        created_count = 0
        updated_count = 0

        with transaction.atomic():
            for year in range(start_year, end_year + 1):
                if not is_supported_year(year):
                    self.stdout.write(
                        self.style.WARNING(f'Skipping year {year} - no data available')
                    )
                    continue

                self.stdout.write(f'BS {year}: {days_in_year(year)} days')

                for month in range(1, 13):
                    try:
                        ad_start = BSDate(year, month, 1).to_gregorian()
                    except MissingCalendarDataError as e:
                        self.stdout.write(
                            self.style.WARNING(f'No AD start date for {year}/{month}: {e}')
                        )
                        ad_start = None

                    obj, created = NepaliCalendar.objects.update_or_create(
                        bs_year=year,
                        month=month,
                        defaults={
                            'days_in_month': days_in_month(year, month),
                            'ad_start_date': ad_start,
                        }
                    )

                    if created:
                        created_count += 1
                    else:
                        updated_count += 1

        self.stdout.write(
            self.style.SUCCESS(
                f'Successfully populated calendar data!\n'
                f'Created: {created_count} entries\n'
                f'Updated: {updated_count} entries'
            )
        )

        total_entries = NepaliCalendar.objects.count()
        year_range = NepaliCalendar.objects.aggregate(
            min_year=models.Min('bs_year'),
            max_year=models.Max('bs_year')
        )

        self.stdout.write(
            self.style.SUCCESS(
                f'\nCalendar Summary:\n'
                f'Total entries: {total_entries}\n'
                f'Year range: {year_range["min_year"]} - {year_range["max_year"]}'
            )
        )
