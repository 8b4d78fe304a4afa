"""
Management command to convert a single date between BS and AD
Usage:
    python manage.py convert_date 2077-09-16            # BS -> AD
    python manage.py convert_date 2020-12-31 --to-bs    # AD -> BS
"""
from django.core.management.base import BaseCommand, CommandError

from bikram_sambat.bsdate import new, new_from_gregorian
from bikram_sambat.exceptions import BSDateError
from bikram_sambat.utils import format_bs_date


def _split_date(value):
    parts = value.split('-')
    if len(parts) != 3:
        raise CommandError(f"Expected a date as YYYY-MM-DD, got '{value}'")
    try:
        year, month, day = (int(part) for part in parts)
    except ValueError:
        raise CommandError(f"Expected a date as YYYY-MM-DD, got '{value}'")
    return year, month, day


class Command(BaseCommand):
    help = 'Convert a date between Bikram Sambat (BS) and Gregorian (AD)'

    def add_arguments(self, parser):
        parser.add_argument('date', help='Date as YYYY-MM-DD')
        direction = parser.add_mutually_exclusive_group()
        direction.add_argument(
            '--to-ad',
            action='store_true',
            help='Treat the date as BS and print the AD date (default)'
        )
        direction.add_argument(
            '--to-bs',
            action='store_true',
            help='Treat the date as AD and print the BS date'
        )

    def handle(self, *args, **options):
        year, month, day = _split_date(options['date'])

        try:
            if options['to_bs']:
                bs_date = new_from_gregorian(day, month, year)
                self.stdout.write(
                    f"{bs_date} BS ({format_bs_date(bs_date.year, bs_date.month, bs_date.day)})"
                )
            else:
                ad_date = new(day, month, year).to_gregorian()
                self.stdout.write(f"{ad_date.isoformat()} AD ({ad_date.strftime('%A')})")
        except BSDateError as e:
            raise CommandError(f"Cannot convert {options['date']}: {e}")
