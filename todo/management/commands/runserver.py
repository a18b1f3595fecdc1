from django.conf import settings
from django.contrib.staticfiles.management.commands.runserver import Command as StaticfilesRunServerCommand


class Command(StaticfilesRunServerCommand):
    help = "Run the development server, listening on the PORT environment variable (default: 5000)"

    default_port = settings.PORT
