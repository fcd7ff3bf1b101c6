"""Celery configuration for the events platform."""

import os

from celery import Celery

# Set the default Django settings module for the 'celery' program.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'settings.main')

app = Celery('events_platform')

# Using a string here means the worker doesn't have to serialize
# the configuration object to child processes.
app.config_from_object('django.conf:settings', namespace='CELERY')

# Load task modules from all registered Django apps.
app.autodiscover_tasks()

app.conf.update(
    worker_hijack_root_logger=False,
    worker_log_color=False,
    task_store_eager_result=True,
    result_persistent=True,
    worker_disable_rate_limits=True,
)


@app.task(bind=True)
def health_check(self):
    """Health check task for monitoring."""
    return {'status': 'healthy', 'worker_id': self.request.id}
