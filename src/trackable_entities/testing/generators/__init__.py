"""Testing generators – Hypothesis strategies."""
from trackable_entities.testing.generators.strategies import entity_identifier_strategy

__all__ = ["entity_identifier_strategy"]
