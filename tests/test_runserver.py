"""Tests for the PORT-aware runserver command."""

import os
import unittest

from django.test import override_settings

from inspire_me.management.commands.runserver import Command


class TestRunserverPort(unittest.TestCase):

    def test_default_port_comes_from_environment(self):
        self.assertEqual(Command().default_port, os.environ.get("PORT", "8080"))

    @override_settings(PORT=9090)
    def test_port_follows_settings(self):
        self.assertEqual(Command().default_port, "9090")
