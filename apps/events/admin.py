from django.contrib import admin
from django.utils.html import format_html

from .models import Event
from .models import EventTicket


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = [
        'title',
        'creator_name',
        'date_str',
        'time_state_display',
        'attending',
        'max_attendees',
        'private',
        'created_at',
    ]
    list_filter = ['time_state', 'private', 'user_generated', 'created_at']
    search_fields = ['title', 'description', 'creator_id', 'creator_name', 'id']
    readonly_fields = ['id', 'link', 'utc_sec_start', 'utc_sec_end', 'default_ticket', 'created_at', 'updated_at']

    fieldsets = (
        ('Basic Information', {'fields': ('title', 'description', 'categories', 'private', 'external_url')}),
        ('Organizer', {'fields': ('creator_id', 'creator_name', 'user_generated')}),
        ('Date and Time', {'fields': ('date', 'date_str', 'duration', 'utc_sec_start', 'utc_sec_end', 'time_state')}),
        ('Location', {'fields': ('country', 'city', 'latitude', 'longitude'), 'classes': ('collapse',)}),
        ('Media', {'fields': ('images', 'main_image'), 'classes': ('collapse',)}),
        ('Capacity', {'fields': ('max_attendees', 'attending', 'sold_out', 'default_ticket')}),
        ('System Fields', {'fields': ('id', 'link', 'created_at', 'updated_at'), 'classes': ('collapse',)}),
    )

    actions = ['mark_events_as_past']

    def time_state_display(self, obj):
        color = 'gray' if obj.is_past else 'green'
        return format_html('<span style="color: {};">{}</span>', color, obj.get_time_state_display())

    time_state_display.short_description = 'State'

    @admin.action(description='Mark selected events as past')
    def mark_events_as_past(self, request, queryset):
        # save() per row so the past-transition trigger fires
        count = 0
        for event in queryset.filter(time_state=Event.TimeState.FUTURE):
            event.time_state = Event.TimeState.PAST
            event.save(update_fields=['time_state', 'updated_at'])
            count += 1
        self.message_user(request, f'{count} events marked as past.')


@admin.register(EventTicket)
class EventTicketAdmin(admin.ModelAdmin):
    list_display = ['id', 'event_id', 'type', 'max_attendees', 'attendees_n', 'status']
    list_filter = ['type', 'status']
    search_fields = ['event_id', 'id']
