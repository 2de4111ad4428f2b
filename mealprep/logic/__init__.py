"""Core business logic layer.

Subpackages:
- matching: ranking recipes by pantry coverage
- reporting: daily nutrition totals
- scanning: turning classifier labels into pantry ingredients
"""
__all__ = ["matching", "reporting", "scanning"]
