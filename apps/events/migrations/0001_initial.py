# Generated migration for events and their ticket types

from django.db import migrations
from django.db import models

import apps.shared.base.models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Event',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                (
                    'id',
                    models.CharField(
                        default=apps.shared.base.models.generate_document_id,
                        editable=False,
                        max_length=64,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ('creator_id', models.CharField(blank=True, db_index=True, max_length=64, verbose_name='Creator ID')),
                ('creator_name', models.CharField(blank=True, max_length=255, verbose_name='Creator Name')),
                ('user_generated', models.BooleanField(default=False, verbose_name='User Generated')),
                ('title', models.CharField(blank=True, max_length=255, verbose_name='Title')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('categories', models.JSONField(blank=True, default=list, verbose_name='Category IDs')),
                ('categories_prefetched', models.JSONField(blank=True, default=list, verbose_name='Category Names')),
                ('images', models.JSONField(blank=True, default=list, verbose_name='Images')),
                ('main_image', models.CharField(blank=True, max_length=255, verbose_name='Main Image')),
                ('private', models.BooleanField(default=False, verbose_name='Private')),
                ('country', models.CharField(blank=True, max_length=100, verbose_name='Country')),
                ('city', models.CharField(blank=True, max_length=100, verbose_name='City')),
                ('external_url', models.CharField(blank=True, max_length=2048, verbose_name='External URL')),
                ('link', models.CharField(blank=True, max_length=512, verbose_name='Short Link')),
                ('date', models.JSONField(blank=True, null=True, verbose_name='Local Date')),
                ('date_str', models.CharField(blank=True, max_length=16, verbose_name='Date String')),
                ('duration', models.PositiveIntegerField(default=0, verbose_name='Duration (sec)')),
                ('utc_sec_start', models.BigIntegerField(blank=True, null=True, verbose_name='Start (UTC sec)')),
                (
                    'utc_sec_end',
                    models.BigIntegerField(blank=True, db_index=True, null=True, verbose_name='End (UTC sec)'),
                ),
                (
                    'time_state',
                    models.CharField(
                        choices=[('future', 'Future'), ('past', 'Past')],
                        db_index=True,
                        default='future',
                        max_length=16,
                        verbose_name='Time State',
                    ),
                ),
                ('time_valid', models.BooleanField(default=True, verbose_name='Time Valid')),
                ('latitude', models.FloatField(blank=True, null=True, verbose_name='Latitude')),
                ('longitude', models.FloatField(blank=True, null=True, verbose_name='Longitude')),
                (
                    'max_attendees',
                    models.IntegerField(default=-1, help_text='-1 means unlimited', verbose_name='Max Attendees'),
                ),
                ('attending', models.PositiveIntegerField(default=0, verbose_name='Attending')),
                ('sold_out', models.BooleanField(default=False, verbose_name='Sold Out')),
                ('rating', models.FloatField(default=0, verbose_name='Rating')),
                ('rating_index', models.IntegerField(default=1, verbose_name='Rating Index')),
                ('default_ticket', models.CharField(blank=True, max_length=64, verbose_name='Default Ticket ID')),
            ],
            options={
                'verbose_name': 'Event',
                'verbose_name_plural': 'Events',
                'db_table': 'events',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='EventTicket',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                (
                    'id',
                    models.CharField(
                        default=apps.shared.base.models.generate_document_id,
                        editable=False,
                        max_length=64,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ('event_id', models.CharField(db_index=True, max_length=64, verbose_name='Event ID')),
                ('type', models.CharField(default='default', max_length=32, verbose_name='Type')),
                ('max_attendees', models.IntegerField(default=-1, verbose_name='Max Attendees')),
                ('attendees_n', models.PositiveIntegerField(default=0, verbose_name='Attendees')),
                (
                    'status',
                    models.CharField(
                        choices=[('valid', 'Valid'), ('invalid', 'Invalid')],
                        default='valid',
                        max_length=16,
                        verbose_name='Status',
                    ),
                ),
                ('link', models.CharField(blank=True, max_length=512, verbose_name='Verification Link')),
            ],
            options={
                'verbose_name': 'Event Ticket',
                'verbose_name_plural': 'Event Tickets',
                'db_table': 'event_tickets',
            },
        ),
    ]
