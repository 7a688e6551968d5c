"""WSGI entry point.

Checks store connectivity once the application is loaded; an unreachable
store is logged and the server starts anyway.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()

from modules.core.db import connect_db  # noqa: E402

connect_db()
