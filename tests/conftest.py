"""
测试配置 - pytest配置文件

提供牌组测试的通用fixture:
- 固定种子的随机数生成器
- 不打乱顺序的随机源，用于验证切牌
- 记录调用次数的随机源，用于验证洗牌次数策略
"""

import logging
import random

import pytest

from french_deck import Deck, DeckType
from french_deck.core.config import PACKAGE_LOGGER_NAME


class IdentityRandom:
    """不改变顺序的随机源"""

    def shuffle(self, x):
        pass


class CountingRandom:
    """记录shuffle调用次数的随机源，顺序保持不变"""

    def __init__(self):
        self.calls = 0

    def shuffle(self, x):
        self.calls += 1


@pytest.fixture
def seeded_rng():
    """固定种子的随机数生成器"""
    return random.Random(20240601)


@pytest.fixture
def identity_rng():
    """不打乱顺序的随机源fixture"""
    return IdentityRandom()


@pytest.fixture
def counting_rng():
    """计数随机源fixture"""
    return CountingRandom()


@pytest.fixture
def french_shuffling_deck(seeded_rng):
    """处于SHUFFLING阶段的52张标准牌组"""
    return Deck.custom_new(rng=seeded_rng).deck_type(DeckType.FULL_FRENCH)


@pytest.fixture
def finished_deck(identity_rng):
    """未洗牌的52张标准牌组，顺序与构建顺序一致"""
    return Deck.custom_new(rng=identity_rng).deck_type(DeckType.FULL_FRENCH).no_shuffle()


@pytest.fixture
def reset_package_logger():
    """测试结束后恢复包日志记录器"""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    original_handlers = logger.handlers[:]
    original_level = logger.level
    yield logger
    for handler in logger.handlers[:]:
        if handler not in original_handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(original_level)
