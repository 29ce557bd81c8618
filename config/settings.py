"""
Django settings for the product variant editor.
"""
import os
from pathlib import Path

import environ

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent

# Initialize environment variables
env = environ.Env(
    DEBUG=(bool, False),
    ALLOWED_HOSTS=(list, []),
    LOG_LEVEL=(str, 'INFO'),
    VARIANT_MAX_COMBINATIONS=(int, 1000),
    VARIANT_PRESERVE_EDITS=(bool, False),
)

# Read .env file if it exists
environ.Env.read_env(os.path.join(BASE_DIR, '.env'))

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = env('SECRET_KEY', default='django-insecure-variant-editor-dev-key')

DEBUG = env('DEBUG')

ALLOWED_HOSTS = env('ALLOWED_HOSTS')

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'rest_framework',
    'apps.catalog',
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

USE_TZ = True
TIME_ZONE = 'UTC'

REST_FRAMEWORK = {
    'COERCE_DECIMAL_TO_STRING': True,
}

# Variant editor
VARIANT_OPTION_CHOICES = ['Size UK', 'Size US', 'Color']

VARIANT_PRESET_VALUES = {
    'Size UK': ['3', '4', '5', '6', '7', '8', '9', '10'],
    'Size US': ['3', '4', '5', '6', '7', '8', '9', '10'],
    'Color': ['Red', 'White', 'Blue', 'Black'],
}

VARIANT_COMBINATION_DEFAULTS = {
    'mrp': 2160,
    'offer_percent': 0,
    'selling_price': 2160,
    'weight': 0,
    'inventory': 100,
}

# Upper bound on combinations per regeneration; larger option sets are rejected
VARIANT_MAX_COMBINATIONS = env('VARIANT_MAX_COMBINATIONS')

# Carry edited prices over to matching rows when options change
VARIANT_PRESERVE_EDITS = env('VARIANT_PRESERVE_EDITS')

PRODUCT_OFFER_CHOICES = ['0% Off', '10% Off', '12% Off', '50% Off']

# Logging
LOG_LEVEL = env('LOG_LEVEL')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'level': LOG_LEVEL,
            'class': 'logging.StreamHandler',
            'formatter': 'verbose' if not DEBUG else 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'apps.catalog': {
            'level': LOG_LEVEL,
        },
    },
}
