"""
WSGI config for todo_project.

It exposes the WSGI callable as a module-level variable named ``application``.
"""

from django.core.wsgi import get_wsgi_application

from todo_project.settings.configure import configure_settings_module

configure_settings_module()

application = get_wsgi_application()
