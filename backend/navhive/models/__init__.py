"""Database models."""

from navhive.models.config_entry import ConfigEntry
from navhive.models.group import Group
from navhive.models.site import Site

__all__ = [
    "ConfigEntry",
    "Group",
    "Site",
]
