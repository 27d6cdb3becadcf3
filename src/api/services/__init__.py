"""
Services module - Business logic layer.

Contains:
- Identity gateway (provider accounts + local user mirror)
"""

from .identity_gateway import IdentityGateway

__all__ = [
    "IdentityGateway",
]
