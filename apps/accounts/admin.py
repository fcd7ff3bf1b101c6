from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.translation import gettext_lazy as _

from .models import Account
from .models import Notification
from .models import UserEventLink
from .models import UserProfile
from .models import UserTicket


@admin.register(Account)
class AccountAdmin(BaseUserAdmin):
    list_display = ('pk', 'email', 'display_name', 'is_active', 'is_staff', 'date_joined')
    list_filter = ('is_active', 'is_staff', 'is_superuser', 'date_joined')
    search_fields = ('email', 'display_name', 'pk')
    ordering = ('-date_joined',)

    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        (_('Personal Info'), {'fields': ('display_name',)}),
        (
            _('Permissions'),
            {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')},
        ),
        (_('Important dates'), {'fields': ('last_login', 'date_joined', 'created_at', 'updated_at')}),
    )
    add_fieldsets = (
        (
            None,
            {
                'classes': ('wide',),
                'fields': ('email', 'display_name', 'password1', 'password2'),
            },
        ),
    )
    readonly_fields = ('date_joined', 'last_login', 'created_at', 'updated_at')


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ['id', 'language', 'email_active', 'user_rating', 'updated_at']
    list_filter = ['email_active', 'language']
    search_fields = ['id']
    readonly_fields = ['id', 'created_at', 'updated_at']


@admin.register(UserEventLink)
class UserEventLinkAdmin(admin.ModelAdmin):
    list_display = ['user_id', 'event_id', 'kind', 'created_at']
    list_filter = ['kind']
    search_fields = ['user_id', 'event_id']


@admin.register(UserTicket)
class UserTicketAdmin(admin.ModelAdmin):
    list_display = ['id', 'user_id', 'event_id', 'status']
    list_filter = ['status']
    search_fields = ['user_id', 'event_id', 'ticket_id']


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ['user_id', 'utc_sec', 'created_at']
    search_fields = ['user_id']
