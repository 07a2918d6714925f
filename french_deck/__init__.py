"""
French Deck - 法式扑克牌领域模型

提供点数、花色、卡牌以及可洗牌、切牌、发牌的分阶段牌组。
"""

from .core import *  # noqa: F401,F403
from .core import __all__

__version__ = "1.0.0"
