#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
核心基础组件模块
包含点数、花色、卡牌、牌组、配置和异常等基础组件
"""

# deck必须先于config导入
from .deck import (
    Rank, Suit, DeckType, DeckStage,
    RANK_VALUES, SUIT_VALUES, get_all_ranks, get_all_suits,
    Card, Deck, RandomSource, cut, permutation_count
)
from .config import DeckConfig, LoggingConfig, setup_logging
from .exceptions import DeckError, ProtocolViolation

__all__ = [
    # 枚举类型
    'Rank', 'Suit', 'DeckType', 'DeckStage',
    'RANK_VALUES', 'SUIT_VALUES', 'get_all_ranks', 'get_all_suits',

    # 卡牌相关
    'Card', 'Deck', 'RandomSource', 'cut', 'permutation_count',

    # 配置相关
    'DeckConfig', 'LoggingConfig', 'setup_logging',

    # 异常类型
    'DeckError', 'ProtocolViolation',
]
