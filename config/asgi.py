"""
ASGI config for the task manager project.

Exposes the ASGI callable as a module-level variable named ``application``
for servers such as Uvicorn or Daphne.
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

from django.core.asgi import get_asgi_application

application = get_asgi_application()
