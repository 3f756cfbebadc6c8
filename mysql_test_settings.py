"""
This is an extension of the default test_settings.py file that uses MySQL and
the relational storage backend. The chemtrade apps should run fine against
SQLite, but this is the configuration production uses.

If you need a compatible MySQL server running locally, spin one up with:
docker run --rm \
    -e MYSQL_DATABASE=chemtrade_db \
    -e MYSQL_USER=test_chemtrade_user \
    -e MYSQL_PASSWORD=test_chemtrade_pass \
    -e MYSQL_RANDOM_ROOT_PASSWORD=true \
    -p 3306:3306 mysql:8
"""

from test_settings import *

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.mysql",
        "NAME": "chemtrade_db",
        "USER": "test_chemtrade_user",
        "PASSWORD": "test_chemtrade_pass",
        "HOST": "127.0.0.1",
        "PORT": "3306",
        "OPTIONS": {
            "charset": "utf8mb4"
        }
    }
}

CHEMTRADE = {
    **CHEMTRADE,
    "STORAGE": {
        "BACKEND": "chemtrade.core.storage.relational.RelationalRepository",
        "OPTIONS": {},
    },
}
