"""
Django settings for testing and development purposes
"""
from __future__ import annotations

import os
from pathlib import Path

# Build paths inside the project like this: BASE_DIR / {dir_name} /
BASE_DIR = Path(__file__).resolve().parents[1]


DEBUG = True

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": "dev.db",
        "USER": "",
        "PASSWORD": "",
        "HOST": "",
        "PORT": "",
    }
}

INSTALLED_APPS = (
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.messages",
    "django.contrib.sessions",
    "django.contrib.staticfiles",
    # Admin
    "django.contrib.admin",
    "django.contrib.admindocs",
    # Chemtrade Core Apps
    "chemtrade.core.content.apps.ContentConfig",
    "chemtrade.core.catalog.apps.CatalogConfig",
    "chemtrade_taxonomy.core.taxonomy.apps.TaxonomyConfig",
    # REST API
    "rest_framework",
    "chemtrade.rest_api.apps.RESTAPIConfig",

    # django-rules based authorization
    'rules.apps.AutodiscoverRulesConfig',

    # Debugging
    "debug_toolbar",
)

AUTHENTICATION_BACKENDS = [
    'rules.permissions.ObjectPermissionBackend',
    'django.contrib.auth.backends.ModelBackend',
]

MIDDLEWARE = [
    "debug_toolbar.middleware.DebugToolbarMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",

    # Admin-specific
    "django.contrib.admindocs.middleware.XViewMiddleware",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ]
        },
    },
]

ROOT_URLCONF = "projects.urls"

SECRET_KEY = "insecure-secret-key"

STATIC_URL = "/static/"
STATICFILES_FINDERS = [
    "django.contrib.staticfiles.finders.FileSystemFinder",
    "django.contrib.staticfiles.finders.AppDirectoriesFinder",
]

USE_TZ = True

INTERNAL_IPS = [
    "127.0.0.1",
]

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "chemtrade": {"handlers": ["console"], "level": "INFO"},
        "chemtrade_taxonomy": {"handlers": ["console"], "level": "INFO"},
    },
}

# chemtrade required configuration
#
# Without CHEMTRADE_STORAGE_BACKEND set, the demo in-memory store is used and
# saved to storage.json next to the database. Set it to
# "chemtrade.core.storage.relational.RelationalRepository" to use the database.
CHEMTRADE = {
    "STORAGE": {
        "BACKEND": os.environ.get(
            "CHEMTRADE_STORAGE_BACKEND",
            "chemtrade.core.storage.memory.MemoryRepository",
        ),
        "OPTIONS": (
            {}
            if os.environ.get("CHEMTRADE_STORAGE_BACKEND")
            else {"data_file": BASE_DIR / "data" / "storage.json"}
        ),
    },
    "PROTECTED_CATEGORIES": [],
}
