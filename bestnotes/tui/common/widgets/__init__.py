"""Reusable widgets."""

from .sprite_button import SpriteButton

__all__ = ["SpriteButton"]
