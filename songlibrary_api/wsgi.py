"""
WSGI config:songlibrary_api project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "songlibrary_api.settings")

application = get_wsgi_application()
