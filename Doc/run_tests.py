#!/usr/bin/env python
"""
Test runner script for the whole backend
Usage: python Doc/run_tests.py [app ...]
"""
import os
import sys

import django
from django.conf import settings
from django.test.utils import get_runner

APPS = [
    'backend.core',
    'backend.access',
    'backend.youth',
    'backend.businesses',
    'backend.mentors',
    'backend.feasibility',
    'backend.makerspaces',
    'backend.reports',
]

if __name__ == "__main__":
    sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'backend.config.settings')
    django.setup()
    TestRunner = get_runner(settings)
    test_runner = TestRunner(verbosity=2)
    labels = [f'backend.{app}' if not app.startswith('backend.') else app for app in sys.argv[1:]] or APPS
    failures = test_runner.run_tests(labels)
    sys.exit(bool(failures))
