"""Serializers mapping JSON:API resources to models."""

from .base import JSONAPISerializer

__all__ = ["JSONAPISerializer"]
