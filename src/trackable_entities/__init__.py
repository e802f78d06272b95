"""
trackable_entities – identity correlation and change notification for
client-side model entities.

Import path convention::

    from trackable_entities.kernel.ddd import ModelBase, notifying_property
    from trackable_entities.kernel.types import EntityIdentifier
    from trackable_entities.config import TrackingSettings, configure
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
