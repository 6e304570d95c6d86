"""
Controller layer for deck builder.

Provides the serializable data transfer objects shared by the UI layers.
"""

from .dto import CardView, DeckSnapshot

__all__ = ['CardView', 'DeckSnapshot']
