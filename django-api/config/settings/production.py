"""
Production settings.
"""

from decouple import config

from .base import *  # noqa

DEBUG = False

SECRET_KEY = config("SECRET_KEY")

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
