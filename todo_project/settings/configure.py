import os
from dotenv import load_dotenv

DEFAULT_SETTINGS_MODULE = "todo_project.settings.settings"


def configure_settings_module():
    """
    Load the .env file and point Django at the consolidated settings module unless
    DJANGO_SETTINGS_MODULE is already set. All environment-specific configuration is
    handled through environment variables.
    """
    load_dotenv()
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", DEFAULT_SETTINGS_MODULE)
