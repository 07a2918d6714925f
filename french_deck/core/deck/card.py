"""
扑克牌数据结构.

定义不可变的Card类，由一个点数和一个花色组成.
"""

from dataclasses import dataclass
from typing import Dict

from .types import Rank, Suit


_RANK_BY_NAME: Dict[str, Rank] = {rank.value.lower(): rank for rank in Rank}
_SUIT_BY_NAME: Dict[str, Suit] = {suit.value.lower(): suit for suit in Suit}


@dataclass(frozen=True)
class Card:
    """
    表示一张法式扑克牌.
    
    不可变数据类，除(点数, 花色)外没有其他身份，点数和花色都相同的两张牌相等.
    
    Attributes:
        rank: 点数
        suit: 花色
        
    Examples:
        >>> card = Card(Rank.ACE, Suit.HEARTS)
        >>> card.render()
        'Ace of Hearts'
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.
        
        Raises:
            TypeError: 当点数或花色类型无效时
        """
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")

    def render(self) -> str:
        """
        返回扑克牌的可读字符串.
        
        Returns:
            str: 格式为"<点数> of <花色>"，如"Ace of Hearts"
        """
        return f"{self.rank} of {self.suit}"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从render()的输出解析扑克牌.
        
        Args:
            card_str: 形如"Ace of Hearts"或"10 of clubs"的字符串，名称不区分大小写
            
        Returns:
            Card: 对应的扑克牌对象
            
        Raises:
            TypeError: 当输入不是字符串时
            ValueError: 当字符串格式、点数或花色无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"输入必须是字符串，实际: {type(card_str)}")

        parts = card_str.strip().split(" of ")
        if len(parts) != 2:
            raise ValueError(f"卡牌字符串格式错误: {card_str!r}")

        rank_str, suit_str = (part.strip().lower() for part in parts)
        if rank_str not in _RANK_BY_NAME:
            raise ValueError(f"无效的点数: {rank_str}")
        if suit_str not in _SUIT_BY_NAME:
            raise ValueError(f"无效的花色: {suit_str}")

        return cls(_RANK_BY_NAME[rank_str], _SUIT_BY_NAME[suit_str])
