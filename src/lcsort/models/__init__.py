"""Shared data types for lcsort.

The component record is produced by lcsort.parse and consumed by
lcsort.compare; configuration types live in lcsort.config.
"""

from lcsort.models.components import (
    COMPARISON_FIELDS,
    CallNumberComponents,
)

__all__ = [
    "COMPARISON_FIELDS",
    "CallNumberComponents",
]
