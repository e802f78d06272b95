"""Kernel value-object types — public re-export surface.

Modules:
  ids.py    — EntityIdentifier
"""

from trackable_entities.kernel.types.ids import EntityIdentifier

__all__ = ["EntityIdentifier"]
