from django.conf import settings
from django.core.management.commands.runserver import Command as RunserverCommand


class Command(RunserverCommand):
    """``runserver`` listening on the PORT setting unless told otherwise."""

    default_port = str(settings.APP_PORT)
