"""
Test settings.

The test database lives in a file so threads in concurrency tests share it
through separate connections.
"""

from .base import *  # noqa

DEBUG = False

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

if DATABASES["default"]["ENGINE"] == "django.db.backends.sqlite3":  # noqa: F405
    DATABASES["default"]["TEST"] = {"NAME": str(BASE_DIR / "test_db.sqlite3")}  # noqa: F405

TICKETS_RESERVE_BACKOFF_SECONDS = 0.01

LOGGING["root"]["level"] = "WARNING"  # noqa: F405
