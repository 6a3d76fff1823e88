"""
Celery configuration for Kinship.

Architecture: Background persistence of audit log entries

Services hand audit payloads to the queue and return immediately;
workers consuming the ``audit`` queue write them to the database.
"""

import os
from celery import Celery

# Set default Django settings module
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

# Create Celery application
app = Celery('kinship')

# Load configuration from Django settings
app.config_from_object('django.conf:settings', namespace='CELERY')

# Auto-discover tasks from all installed apps
app.autodiscover_tasks()
