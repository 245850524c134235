"""WSGI entry point for the festival events API."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "festival_api.settings")

application = get_wsgi_application()
