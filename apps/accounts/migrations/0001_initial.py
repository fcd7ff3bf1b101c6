# Generated migration for the account, profile and per-user collection tables

import django.utils.timezone
from django.db import migrations
from django.db import models

import apps.accounts.managers.account_manager
import apps.accounts.models.profile
import apps.shared.base.models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
    ]

    operations = [
        migrations.CreateModel(
            name='Account',
            fields=[
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                (
                    'is_superuser',
                    models.BooleanField(
                        default=False,
                        help_text='Designates that this user has all permissions without explicitly assigning them.',
                        verbose_name='superuser status',
                    ),
                ),
                (
                    'is_staff',
                    models.BooleanField(
                        default=False,
                        help_text='Designates whether the user can log into this admin site.',
                        verbose_name='staff status',
                    ),
                ),
                (
                    'is_active',
                    models.BooleanField(
                        default=True,
                        help_text=(
                            'Designates whether this user should be treated as active. '
                            'Unselect this instead of deleting accounts.'
                        ),
                        verbose_name='active',
                    ),
                ),
                ('date_joined', models.DateTimeField(default=django.utils.timezone.now, verbose_name='date joined')),
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
                (
                    'email',
                    models.EmailField(blank=True, max_length=254, null=True, unique=True, verbose_name='email address'),
                ),
                ('display_name', models.CharField(blank=True, max_length=255, verbose_name='Display Name')),
                (
                    'groups',
                    models.ManyToManyField(
                        blank=True,
                        help_text=(
                            'The groups this user belongs to. A user will get all permissions granted to each of '
                            'their groups.'
                        ),
                        related_name='user_set',
                        related_query_name='user',
                        to='auth.group',
                        verbose_name='groups',
                    ),
                ),
                (
                    'user_permissions',
                    models.ManyToManyField(
                        blank=True,
                        help_text='Specific permissions for this user.',
                        related_name='user_set',
                        related_query_name='user',
                        to='auth.permission',
                        verbose_name='user permissions',
                    ),
                ),
            ],
            options={
                'verbose_name': 'Account',
                'verbose_name_plural': 'Accounts',
                'db_table': 'accounts_account',
            },
            managers=[
                ('objects', apps.accounts.managers.account_manager.AccountManager()),
            ],
        ),
        migrations.CreateModel(
            name='UserProfile',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('id', models.CharField(editable=False, max_length=64, primary_key=True, serialize=False)),
                (
                    'authorities',
                    models.JSONField(
                        default=apps.accounts.models.profile.default_authorities,
                        help_text='Authority id ("self" or community id) to level; 0 grants full control',
                        verbose_name='Authorities',
                    ),
                ),
                (
                    'subscriptions',
                    models.JSONField(
                        default=apps.accounts.models.profile.default_subscriptions, verbose_name='Subscriptions'
                    ),
                ),
                ('language', models.CharField(default='en', max_length=16, verbose_name='Language')),
                ('email_active', models.BooleanField(default=True, verbose_name='Email Active')),
                ('user_rating', models.IntegerField(default=0, verbose_name='User Rating')),
                ('cache_utc_sec', models.BigIntegerField(default=0, verbose_name='Cache Timestamp (UTC sec)')),
                ('messaging_tokens', models.JSONField(blank=True, default=dict, verbose_name='Messaging Tokens')),
            ],
            options={
                'verbose_name': 'User Profile',
                'verbose_name_plural': 'User Profiles',
                'db_table': 'users',
            },
        ),
        migrations.CreateModel(
            name='UserEventLink',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user_id', models.CharField(db_index=True, max_length=64)),
                ('event_id', models.CharField(db_index=True, max_length=64)),
                (
                    'kind',
                    models.CharField(choices=[('attending', 'Attending'), ('saved', 'Saved')], max_length=16),
                ),
            ],
            options={
                'db_table': 'user_event_links',
                'indexes': [models.Index(fields=['event_id', 'kind'], name='user_event_link_event_kind')],
                'constraints': [
                    models.UniqueConstraint(fields=('user_id', 'event_id', 'kind'), name='unique_user_event_link')
                ],
            },
        ),
        migrations.CreateModel(
            name='UserTicket',
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
                ('user_id', models.CharField(db_index=True, max_length=64)),
                ('event_id', models.CharField(db_index=True, max_length=64)),
                ('ticket_id', models.CharField(blank=True, max_length=64)),
                (
                    'status',
                    models.CharField(
                        choices=[('valid', 'Valid'), ('invalid', 'Invalid')], default='valid', max_length=16
                    ),
                ),
            ],
            options={
                'db_table': 'user_tickets',
            },
        ),
        migrations.CreateModel(
            name='UserCategory',
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
                ('user_id', models.CharField(db_index=True, max_length=64)),
                ('category_id', models.CharField(max_length=64)),
            ],
            options={
                'verbose_name_plural': 'User Categories',
                'db_table': 'user_categories',
            },
        ),
        migrations.CreateModel(
            name='Notification',
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
                ('user_id', models.CharField(db_index=True, max_length=64)),
                ('payload', models.JSONField(default=dict)),
                ('utc_sec', models.BigIntegerField()),
            ],
            options={
                'db_table': 'notifications',
                'ordering': ['utc_sec'],
            },
        ),
    ]
