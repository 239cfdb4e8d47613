"""Common utility functions for lcsort."""

from lcsort.utils.timestamps import get_iso_timestamp

__all__ = ["get_iso_timestamp"]
