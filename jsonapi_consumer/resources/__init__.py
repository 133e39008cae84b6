"""Resource sets for remote JSON:API collections."""

from .base import JSONAPIResourceSet, ResourcePage

__all__ = ["JSONAPIResourceSet", "ResourcePage"]
