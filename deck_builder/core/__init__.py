"""
Core deck building logic.

This package contains the card model, the deck transform options, the
pipeline builder and its configuration.
"""

from .enums import Suit, Rank, get_all_suits, get_all_ranks
from .cards import Card
from .options import (
    Transform, abs_rank, less, shuffle, shuffle_with, default_sort, sort_by,
    filter_rank, filter_suit, filter_specific, jokers, multiple_decks,
)
from .builder import DeckBuilder, base_deck, new
from .config import DeckConfig
from .exceptions import DeckError, InvalidCardError, CardParseError, DeckConfigError

__all__ = [
    # Enums
    'Suit', 'Rank', 'get_all_suits', 'get_all_ranks',

    # Cards
    'Card',

    # Options
    'Transform', 'abs_rank', 'less', 'shuffle', 'shuffle_with', 'default_sort', 'sort_by',
    'filter_rank', 'filter_suit', 'filter_specific', 'jokers', 'multiple_decks',

    # Builder and configuration
    'DeckBuilder', 'base_deck', 'new', 'DeckConfig',

    # Exceptions
    'DeckError', 'InvalidCardError', 'CardParseError', 'DeckConfigError',
]
