import sys
from datetime import timedelta

from .base import *

INSTALLED_APPS += [
    'corsheaders',
    'rest_framework',
    'rest_framework_simplejwt',
    'rest_framework_simplejwt.token_blacklist',
    'drf_spectacular',
    'django_celery_beat',
    'apps.shared',
    'apps.accounts',
    'apps.communities',
    'apps.events',
    'apps.mediafiles',
]

REST_FRAMEWORK = {
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],
    'DEFAULT_SCHEMA_CLASS': 'drf_spectacular.openapi.AutoSchema',
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework_simplejwt.authentication.JWTAuthentication',
    ],
    'EXCEPTION_HANDLER': 'apps.shared.exceptions.api_handler.custom_exception_handler',
}

AUTH_USER_MODEL = 'accounts.Account'

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'middleware.storage_exception_middleware.StorageExceptionMiddleware',
]

# Environment
TESTING_ENVIRONMENT = 'testing'
PRODUCTION_ENVIRONMENT = 'production'
STAGING_ENVIRONMENT = 'staging'
DEVELOPMENT_ENVIRONMENT = 'development'

if 'test' in sys.argv:  # noqa: SIM108
    ENVIRONMENT = TESTING_ENVIRONMENT
else:
    ENVIRONMENT = env.str('ENVIRONMENT', default=DEVELOPMENT_ENVIRONMENT)

if ENVIRONMENT == TESTING_ENVIRONMENT:
    PASSWORD_HASHERS = [
        'django.contrib.auth.hashers.MD5PasswordHasher',
    ]

# CORS
CORS_ALLOW_CREDENTIALS = True
CORS_ALLOWED_ORIGINS = [
    'http://localhost:3000',
    'http://127.0.0.1:3000',
    env.str('FRONTEND_URL', default='http://localhost:3000'),
]

if DEBUG:
    CORS_ALLOW_ALL_ORIGINS = True

CORS_ALLOW_HEADERS = [
    'accept',
    'accept-encoding',
    'authorization',
    'content-type',
    'dnt',
    'origin',
    'user-agent',
    'x-csrftoken',
    'x-requested-with',
    'x-storage-webhook-token',
]

# Swagger
SPECTACULAR_SETTINGS = {
    'TITLE': 'Events Platform API',
    'DESCRIPTION': 'Events, authorities, tickets and user lifecycle',
    'VERSION': 'v1',
    'SERVE_INCLUDE_SCHEMA': False,
}

# Simple JWT
SIMPLE_JWT = {
    'ACCESS_TOKEN_LIFETIME': timedelta(minutes=60),
    'REFRESH_TOKEN_LIFETIME': timedelta(days=30),
    'ROTATE_REFRESH_TOKENS': True,
    'BLACKLIST_AFTER_ROTATION': True,
    'UPDATE_LAST_LOGIN': True,
    'ALGORITHM': 'HS256',
    'SIGNING_KEY': SECRET_KEY,
    'AUTH_HEADER_TYPES': ('Bearer',),
    'USER_ID_FIELD': 'id',
    'USER_ID_CLAIM': 'user_id',
}

# Object storage (S3)
AWS_ACCESS_KEY_ID = env.str('AWS_ACCESS_KEY_ID', default='')
AWS_SECRET_ACCESS_KEY = env.str('AWS_SECRET_ACCESS_KEY', default='')
AWS_S3_REGION_NAME = env.str('AWS_S3_REGION_NAME', default='eu-north-1')
S3_BUCKET_NAME = env.str('S3_BUCKET_NAME', default='events-media')
EVENT_IMAGES_PREFIX = env.str('EVENT_IMAGES_PREFIX', default='external/images/')
STORAGE_WEBHOOK_TOKEN = env.str('STORAGE_WEBHOOK_TOKEN', default='')

# Media post-processing
MEDIA_RESIZE_WIDTH = 1200
MEDIA_RESIZE_PREFIX = 'resized'
MEDIA_RESIZE_TIME_LIMIT = env.int('MEDIA_RESIZE_TIME_LIMIT', default=60)

# Short links
DYNAMIC_LINKS_API_URL = env.str(
    'DYNAMIC_LINKS_API_URL', default='https://firebasedynamiclinks.googleapis.com/v1/shortLinks'
)
DYNAMIC_LINKS_API_KEY = env.str('DYNAMIC_LINKS_API_KEY', default='')
DYNAMIC_LINKS_DOMAIN_PREFIX = env.str('DYNAMIC_LINKS_DOMAIN_PREFIX', default='https://hseconnectservice.page.link')
DEEP_LINK_BASE_URL = env.str('DEEP_LINK_BASE_URL', default='https://hseconnect.ru/')
IOS_BUNDLE_ID = env.str('IOS_BUNDLE_ID', default='')
IOS_APP_STORE_ID = env.str('IOS_APP_STORE_ID', default='')
LINK_REQUEST_TIMEOUT = env.int('LINK_REQUEST_TIMEOUT', default=10)

# Event defaults
EVENT_DEFAULT_COUNTRY = env.str('EVENT_DEFAULT_COUNTRY', default='russia')
EVENT_DEFAULT_CITY = env.str('EVENT_DEFAULT_CITY', default='moscow')
EVENT_MAX_IMAGES = 5

# Celery Configuration
CELERY_BROKER_URL = env.str('CELERY_BROKER_URL', default='redis://localhost:6379/0')
CELERY_RESULT_BACKEND = env.str('CELERY_RESULT_BACKEND', default='redis://localhost:6379/1')

CELERY_TASK_SERIALIZER = 'json'
CELERY_ACCEPT_CONTENT = ['json']
CELERY_RESULT_SERIALIZER = 'json'
CELERY_TIMEZONE = TIME_ZONE
CELERY_ENABLE_UTC = True

CELERY_TASK_ALWAYS_EAGER = False
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_TASK_IGNORE_RESULT = False

CELERY_WORKER_PREFETCH_MULTIPLIER = 1
CELERY_WORKER_MAX_TASKS_PER_CHILD = 1000

CELERY_TASK_SOFT_TIME_LIMIT = 300  # 5 minutes
CELERY_TASK_TIME_LIMIT = 600  # 10 minutes
CELERY_TASK_ACKS_LATE = True
CELERY_TASK_REJECT_ON_WORKER_LOST = True

CELERY_TASK_ROUTES = {
    'apps.mediafiles.tasks.process_uploaded_image': {'queue': 'media'},
    'apps.events.tasks.expire_finished_events': {'queue': 'maintenance'},
}

CELERY_BEAT_SCHEDULER = 'django_celery_beat.schedulers:DatabaseScheduler'
CELERY_BEAT_SCHEDULE = {
    'expire-finished-events': {
        'task': 'apps.events.tasks.expire_finished_events',
        'schedule': 300.0,
    },
}

CELERY_RESULT_EXPIRES = 3600  # 1 hour
