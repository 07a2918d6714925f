"""
法式扑克牌组管理.

定义分阶段构建的Deck类:
    START -> BUILDING -> SHUFFLING -> FINISHED

每个推进阶段的操作都会消费当前牌组对象并返回一个处于下一阶段的新牌组，
已消费的对象不能再使用。在错误阶段调用操作会抛出ProtocolViolation.

Examples:
    >>> deck = Deck.custom_new().deck_type(DeckType.FULL_FRENCH).shuffle(7)
    >>> deck.remaining_count
    52
    >>> card = deck.deal_top()
"""

import logging
import random
from collections import deque
from typing import Iterable, List, MutableSequence, Optional, Protocol, Sequence, Tuple

from ..config import DeckConfig
from ..exceptions import ProtocolViolation
from .card import Card
from .types import DeckStage, DeckType, Rank, Suit, RANK_VALUES, SUIT_VALUES

logger = logging.getLogger(__name__)

# 1到MAX_COUNTED_SHUFFLES之间的洗牌次数会额外多洗一次
MAX_COUNTED_SHUFFLES = 10

# 预定义牌组类型对应的点数和花色
_DECK_TYPE_CONTENTS = {
    DeckType.FULL_FRENCH: (RANK_VALUES, SUIT_VALUES),
}


class RandomSource(Protocol):
    """洗牌所需的随机源协议，random.Random即满足该协议"""

    def shuffle(self, x: MutableSequence) -> None:
        """原地打乱序列"""
        ...


def permutation_count(shuffles: int) -> int:
    """
    计算给定洗牌次数实际执行的随机置换次数.
    
    1到10之间执行shuffles + 1次，0或大于10时只执行1次.
    
    Args:
        shuffles: 请求的洗牌次数
        
    Returns:
        int: 实际执行的置换次数
    """
    if 1 <= shuffles <= MAX_COUNTED_SHUFFLES:
        return shuffles + 1
    return 1


def cut(cards: Sequence[Card]) -> List[Card]:
    """
    切牌: 在中点分开并交换前后两半.
    
    中点为len // 2，奇数长度时前半部分少一张.
    
    Args:
        cards: 切牌前的序列
        
    Returns:
        List[Card]: cards[mid:] + cards[:mid]
    """
    halfway = len(cards) // 2
    return list(cards[halfway:]) + list(cards[:halfway])


class Deck:
    """
    表示一副分阶段构建的扑克牌.
    
    通过Deck.custom_new()或Deck.default_new()创建，不建议直接实例化.
    随机源可以注入，以支持确定性测试.
    
    Attributes:
        _cards: 当前牌组中的牌，左端为顶部
        _stage: 当前生命周期阶段
        _rng: 注入的随机源，None时洗牌使用新的random.Random()
        _consumed: 是否已被阶段转换消费
    """

    def __init__(self,
                 cards: Optional[Iterable[Card]] = None,
                 stage: DeckStage = DeckStage.START,
                 rng: Optional[RandomSource] = None) -> None:
        self._cards = deque(cards or ())
        self._stage = stage
        self._rng = rng
        self._consumed = False

    @classmethod
    def custom_new(cls, rng: Optional[RandomSource] = None) -> 'Deck':
        """
        开始构建一副自定义牌组.
        
        Args:
            rng: 随机源，贯穿后续所有阶段
            
        Returns:
            Deck: 处于BUILDING阶段的牌组
        """
        return cls(rng=rng)._advance("custom_new", DeckStage.START, DeckStage.BUILDING, [])

    @classmethod
    def default_new(cls, config: Optional[DeckConfig] = None) -> 'Deck':
        """
        创建一副按配置洗好的标准牌组.
        
        默认配置为52张法式牌洗7次.
        
        Args:
            config: 牌组配置，None时使用默认配置
            
        Returns:
            Deck: 处于FINISHED阶段的牌组
        """
        config = config or DeckConfig()
        return (cls.custom_new(rng=config.create_rng())
                .deck_type(config.deck_type)
                .shuffle(config.default_shuffles))

    def deck_type(self, deck_type: DeckType) -> 'Deck':
        """
        按预定义类型构建牌组.
        
        Args:
            deck_type: 牌组类型
            
        Returns:
            Deck: 处于SHUFFLING阶段的牌组
            
        Raises:
            ProtocolViolation: 当前不在BUILDING阶段
            TypeError: deck_type不是DeckType
        """
        self._require("deck_type", DeckStage.BUILDING)
        if not isinstance(deck_type, DeckType):
            raise TypeError(f"无效的牌组类型: {deck_type!r}")

        ranks, suits = _DECK_TYPE_CONTENTS[deck_type]
        cards = self._build_cards(ranks, suits)

        return self._advance("deck_type", DeckStage.BUILDING, DeckStage.SHUFFLING, cards)

    def custom_deck_type(self, ranks: Iterable[Rank], suits: Iterable[Suit]) -> 'Deck':
        """
        用自定义的点数和花色列表构建牌组.
        
        每个点数与每个花色组合一次，列表中的重复元素会保留，
        例如需要两套红桃时在suits中放两个Suit.HEARTS.
        
        Args:
            ranks: 点数列表
            suits: 花色列表
            
        Returns:
            Deck: 处于SHUFFLING阶段的牌组，共len(ranks) * len(suits)张
            
        Raises:
            ProtocolViolation: 当前不在BUILDING阶段
            TypeError: 列表中包含非Rank或非Suit元素
        """
        self._require("custom_deck_type", DeckStage.BUILDING)
        cards = self._build_cards(list(ranks), list(suits))
        return self._advance("custom_deck_type", DeckStage.BUILDING, DeckStage.SHUFFLING, cards)

    @staticmethod
    def _build_cards(ranks: Sequence[Rank], suits: Sequence[Suit]) -> List[Card]:
        """花色为外层循环、点数为内层循环生成笛卡尔积"""
        return [Card(rank, suit) for suit in suits for rank in ranks]

    def shuffle(self, shuffles: int, rng: Optional[RandomSource] = None) -> 'Deck':
        """
        洗牌并切牌.
        
        先执行permutation_count(shuffles)次随机置换，再无条件切牌一次.
        
        Args:
            shuffles: 洗牌次数，非负整数
            rng: 本次使用的随机源，None时使用构建时注入的随机源
            
        Returns:
            Deck: 处于FINISHED阶段的牌组
            
        Raises:
            ProtocolViolation: 当前不在SHUFFLING阶段
            TypeError: shuffles不是整数
            ValueError: shuffles为负数
        """
        self._require("shuffle", DeckStage.SHUFFLING)
        if isinstance(shuffles, bool) or not isinstance(shuffles, int):
            raise TypeError(f"洗牌次数必须是整数: {shuffles!r}")
        if shuffles < 0:
            raise ValueError(f"洗牌次数不能为负数: {shuffles}")

        if rng is None:
            rng = self._rng if self._rng is not None else random.Random()

        cards = list(self._cards)
        rounds = permutation_count(shuffles)
        for _ in range(rounds):
            rng.shuffle(cards)
        logger.debug(f"洗牌完成: 请求{shuffles}次，实际置换{rounds}次")

        cards = cut(cards)
        logger.debug(f"切牌完成: 切点{len(cards) // 2}")

        return self._advance("shuffle", DeckStage.SHUFFLING, DeckStage.FINISHED, cards)

    def no_shuffle(self) -> 'Deck':
        """
        不洗牌也不切牌，保持构建时的顺序.
        
        Returns:
            Deck: 处于FINISHED阶段的牌组
        """
        self._require("no_shuffle", DeckStage.SHUFFLING)
        return self._advance("no_shuffle", DeckStage.SHUFFLING, DeckStage.FINISHED, list(self._cards))

    def deal_top(self) -> Optional[Card]:
        """
        从顶部发一张牌.
        
        Returns:
            Optional[Card]: 发出的牌，牌组为空时返回None
        """
        self._require("deal_top", DeckStage.FINISHED)
        if not self._cards:
            logger.debug("牌组已空，deal_top无牌可发")
            return None
        card = self._cards.popleft()
        logger.debug(f"从顶部发牌: {card}，剩余{len(self._cards)}张")
        return card

    def deal_bottom(self) -> Optional[Card]:
        """
        从底部发一张牌.
        
        Returns:
            Optional[Card]: 发出的牌，牌组为空时返回None
        """
        self._require("deal_bottom", DeckStage.FINISHED)
        if not self._cards:
            logger.debug("牌组已空，deal_bottom无牌可发")
            return None
        card = self._cards.pop()
        logger.debug(f"从底部发牌: {card}，剩余{len(self._cards)}张")
        return card

    @property
    def remaining_count(self) -> int:
        """返回牌组中剩余的牌数"""
        self._require("remaining_count", DeckStage.FINISHED)
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        """检查牌组是否为空"""
        return len(self._cards) == 0

    @property
    def stage(self) -> DeckStage:
        """获取当前阶段"""
        return self._stage

    @property
    def is_consumed(self) -> bool:
        """检查牌组是否已被阶段转换消费"""
        return self._consumed

    @property
    def cards(self) -> Tuple[Card, ...]:
        """
        获取当前牌序的快照，第一张为顶部.
        
        Raises:
            ProtocolViolation: 牌组已被消费
        """
        if self._consumed:
            raise ProtocolViolation("cards", self._stage, None)
        return tuple(self._cards)

    def _require(self, operation: str, expected: DeckStage) -> None:
        """检查当前阶段是否允许执行操作"""
        if self._consumed:
            raise ProtocolViolation(operation, expected, None)
        if self._stage is not expected:
            raise ProtocolViolation(operation, expected, self._stage)

    def _advance(self, operation: str, expected: DeckStage, target: DeckStage,
                 cards: Iterable[Card]) -> 'Deck':
        """
        消费当前牌组并返回处于目标阶段的新牌组.
        
        Args:
            operation: 触发转换的操作名
            expected: 转换前要求的阶段
            target: 目标阶段
            cards: 新牌组的牌序
        """
        self._require(operation, expected)
        successor = Deck(cards, target, self._rng)
        self._consumed = True
        self._cards.clear()
        logger.debug(f"牌组阶段转换: {expected.name} -> {target.name} ({operation})，"
                     f"共{len(successor)}张")
        return successor

    def __len__(self) -> int:
        """返回牌组中的牌数，已消费的牌组为0"""
        return len(self._cards)

    def __repr__(self) -> str:
        """返回牌组的调试表示"""
        state = "consumed" if self._consumed else self._stage.name
        return f"Deck(stage={state}, remaining={len(self._cards)})"

    def __str__(self) -> str:
        """返回牌组的可读表示"""
        return f"牌组({self._stage.name}) 剩余: {len(self._cards)} 张"
