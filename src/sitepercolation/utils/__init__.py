"""Common utility functions for sitepercolation."""

from sitepercolation.utils.timestamps import get_iso_timestamp

__all__ = ["get_iso_timestamp"]
