"""
Deck Builder

Builds standard playing-card decks from a canonical 52-card sequence and a
list of composable transform options (filter, shuffle, sort, jokers,
multiple decks).
"""

from .core import (
    Suit, Rank, Card, Transform, DeckBuilder, DeckConfig, base_deck, new,
    abs_rank, less, shuffle, shuffle_with, default_sort, sort_by,
    filter_rank, filter_suit, filter_specific, jokers, multiple_decks,
    DeckError, InvalidCardError, CardParseError, DeckConfigError,
)
from .controller import CardView, DeckSnapshot

__version__ = "0.1.0"
__author__ = "Deck Builder Development Team"

__all__ = [
    'Suit', 'Rank', 'Card', 'Transform', 'DeckBuilder', 'DeckConfig', 'base_deck', 'new',
    'abs_rank', 'less', 'shuffle', 'shuffle_with', 'default_sort', 'sort_by',
    'filter_rank', 'filter_suit', 'filter_specific', 'jokers', 'multiple_decks',
    'DeckError', 'InvalidCardError', 'CardParseError', 'DeckConfigError',
    'CardView', 'DeckSnapshot',
]
