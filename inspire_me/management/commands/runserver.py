"""
Development server that listens on the PORT setting.

``python manage.py runserver`` binds to ``settings.PORT`` (from the ``PORT``
environment variable, 8080 by default) unless an address is passed explicitly.
"""
import logging

from django.conf import settings
from django.core.management.commands.runserver import Command as RunserverCommand

logger = logging.getLogger(__name__)


class Command(RunserverCommand):
    help = "Start the development server on the configured PORT"

    @property
    def default_port(self):
        return str(settings.PORT)

    def inner_run(self, *args, **options):
        logger.info(f"Starting server on port {self.port}...")
        super().inner_run(*args, **options)
