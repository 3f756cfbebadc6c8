"""
These settings are here to use during tests, because django requires them.

In a real-world use case, apps in this project are installed into other
Django applications, so these settings will not be used.
"""

from os.path import abspath, dirname, join


def root(*args):
    """
    Get the absolute path of the given path relative to the project root.
    """
    return join(abspath(dirname(__file__)), *args)


DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": "default.db",
        "USER": "",
        "PASSWORD": "",
        "HOST": "",
        "PORT": "",
    }
}

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.messages",
    "django.contrib.sessions",
    "django.contrib.staticfiles",
    # Admin
    'django.contrib.admin',
    # REST API
    "rest_framework",
    # django-rules based authorization
    'rules.apps.AutodiscoverRulesConfig',
    # Our own apps
    "chemtrade.core.content.apps.ContentConfig",
    "chemtrade.core.catalog.apps.CatalogConfig",
    "chemtrade.rest_api.apps.RESTAPIConfig",
    "chemtrade_taxonomy.core.taxonomy.apps.TaxonomyConfig",
]

AUTHENTICATION_BACKENDS = [
    'rules.permissions.ObjectPermissionBackend',
]

ROOT_URLCONF = "projects.urls"

SECRET_KEY = "insecure-secret-key"

USE_TZ = True

STATIC_URL = 'static/'

########################### CHEMTRADE SETTINGS ##########################

# Tests use the in-memory Repository without a data file by default; storage
# tests that need the relational backend or a file override this.
CHEMTRADE = {
    "STORAGE": {
        "BACKEND": "chemtrade.core.storage.memory.MemoryRepository",
        "OPTIONS": {},
    },
    "PROTECTED_CATEGORIES": [],
}
