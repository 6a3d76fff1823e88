"""
Common base models for Kinship.

This module contains abstract base models shared by every app.
"""

from django.db import models
from django.utils import timezone


class BaseModel(models.Model):
    """
    Abstract base model with timestamp tracking.

    All models inheriting from BaseModel automatically get
    created_at and updated_at.
    """

    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
