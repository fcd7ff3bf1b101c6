# Generated migration for communities, categories and cache metadata

from django.db import migrations
from django.db import models

import apps.shared.base.models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Community',
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
                ('display_name', models.CharField(max_length=255, verbose_name='Display Name')),
                ('images', models.JSONField(blank=True, default=list, verbose_name='Images')),
            ],
            options={
                'verbose_name': 'Community',
                'verbose_name_plural': 'Communities',
                'db_table': 'communities',
            },
        ),
        migrations.CreateModel(
            name='Category',
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
                ('display_name', models.CharField(max_length=255, verbose_name='Display Name')),
            ],
            options={
                'verbose_name': 'Category',
                'verbose_name_plural': 'Categories',
                'db_table': 'categories',
            },
        ),
        migrations.CreateModel(
            name='CacheMetadata',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                (
                    'id',
                    models.PositiveSmallIntegerField(default=1, editable=False, primary_key=True, serialize=False),
                ),
                (
                    'categories_utc_sec',
                    models.BigIntegerField(default=0, verbose_name='Categories Updated (UTC sec)'),
                ),
                (
                    'communities_utc_sec',
                    models.BigIntegerField(default=0, verbose_name='Communities Updated (UTC sec)'),
                ),
            ],
            options={
                'verbose_name': 'Cache Metadata',
                'verbose_name_plural': 'Cache Metadata',
                'db_table': 'cache_metadata',
            },
        ),
    ]
