"""
ASGI config for todo_project.

It exposes the ASGI callable as a module-level variable named ``application``.
"""

from django.core.asgi import get_asgi_application

from todo_project.settings.configure import configure_settings_module

configure_settings_module()

application = get_asgi_application()
