from django.contrib import admin

from .exceptions import MissingCalendarDataError
from .models import NepaliCalendar


@admin.register(NepaliCalendar)
class NepaliCalendarAdmin(admin.ModelAdmin):
    list_display = ['bs_year', 'month_display', 'days_in_month', 'ad_start_date', 'ad_end_date']
    list_filter = ['bs_year', 'month']
    search_fields = ['bs_year']
    ordering = ['-bs_year', 'month']
    list_per_page = 50

    def month_display(self, obj):
        return obj.get_month_display()
    month_display.short_description = 'Month'
    month_display.admin_order_field = 'month'

    def ad_end_date(self, obj):
        try:
            return obj.to_bsdate(obj.days_in_month).to_gregorian()
        except MissingCalendarDataError:
            return None
    ad_end_date.short_description = 'AD End'

    fieldsets = (
        ('Nepali Date', {
            'fields': ('bs_year', 'month', 'days_in_month')
        }),
        ('Gregorian Reference', {
            'fields': ('ad_start_date',)
        }),
    )
