"""
法式扑克牌组模块.

提供Rank、Suit、Card和分阶段构建的Deck.
"""

from .types import (
    Rank, Suit, DeckType, DeckStage,
    RANK_VALUES, SUIT_VALUES, get_all_ranks, get_all_suits
)
from .card import Card
from .deck import Deck, RandomSource, cut, permutation_count

__all__ = [
    'Rank', 'Suit', 'DeckType', 'DeckStage',
    'RANK_VALUES', 'SUIT_VALUES', 'get_all_ranks', 'get_all_suits',
    'Card', 'Deck', 'RandomSource', 'cut', 'permutation_count',
]
