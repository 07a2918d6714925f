"""
法式扑克牌相关类型定义.

定义扑克牌的点数、花色、牌组类型和牌组生命周期阶段等基础枚举.
"""

from enum import Enum, auto
from typing import Dict, List, Tuple


class Rank(Enum):
    """
    扑克牌点数枚举.
    
    定义13种点数，枚举值即为显示名称.
    点数之间没有隐含的大小关系，比较时必须通过numeric_value显式选择A的高低.
    """

    ACE = "Ace"
    KING = "King"
    QUEEN = "Queen"
    JACK = "Jack"
    TEN = "10"
    NINE = "9"
    EIGHT = "8"
    SEVEN = "7"
    SIX = "6"
    FIVE = "5"
    FOUR = "4"
    THREE = "3"
    TWO = "2"

    def numeric_value(self, aces_high: bool) -> int:
        """
        获取点数的数值表示.
        
        Args:
            aces_high: True时A为14(最大)，False时A为1(最小)
            
        Returns:
            int: 点数对应的数值
            
        Examples:
            >>> Rank.ACE.numeric_value(aces_high=True)
            14
            >>> Rank.ACE.numeric_value(aces_high=False)
            1
        """
        if aces_high:
            return _ACES_HIGH_VALUES[self]
        return _ACES_LOW_VALUES[self]

    def __str__(self) -> str:
        return self.value


class Suit(Enum):
    """
    扑克牌花色枚举.
    
    定义四种标准花色，枚举值即为显示名称.
    迭代顺序请使用SUIT_VALUES而不是枚举自身的声明顺序.
    """

    HEARTS = "Hearts"      # 红桃
    SPADES = "Spades"      # 黑桃
    DIAMONDS = "Diamonds"  # 方块
    CLUBS = "Clubs"        # 梅花

    def __str__(self) -> str:
        return self.value


class DeckType(Enum):
    """预定义的牌组类型"""
    FULL_FRENCH = "full_french"    # 标准52张法式牌


class DeckStage(Enum):
    """
    牌组生命周期阶段.
    
    阶段只能按 START -> BUILDING -> SHUFFLING -> FINISHED 单向推进.
    """
    START = auto()
    BUILDING = auto()
    SHUFFLING = auto()
    FINISHED = auto()


# A为14，其余从K=13连续到2
_ACES_HIGH_VALUES: Dict[Rank, int] = {
    Rank.ACE: 14, Rank.KING: 13, Rank.QUEEN: 12, Rank.JACK: 11,
    Rank.TEN: 10, Rank.NINE: 9, Rank.EIGHT: 8, Rank.SEVEN: 7,
    Rank.SIX: 6, Rank.FIVE: 5, Rank.FOUR: 4, Rank.THREE: 3, Rank.TWO: 2
}

# A为1，K仍为13
_ACES_LOW_VALUES: Dict[Rank, int] = {
    **_ACES_HIGH_VALUES,
    Rank.ACE: 1
}

# 点数的规范迭代顺序: 从A到2
RANK_VALUES: Tuple[Rank, ...] = (
    Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.TEN, Rank.NINE,
    Rank.EIGHT, Rank.SEVEN, Rank.SIX, Rank.FIVE, Rank.FOUR, Rank.THREE,
    Rank.TWO
)

# 花色的规范迭代顺序，牌组构建依赖此顺序
SUIT_VALUES: Tuple[Suit, ...] = (
    Suit.HEARTS, Suit.CLUBS, Suit.DIAMONDS, Suit.SPADES
)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.
    
    Returns:
        List[Rank]: 按RANK_VALUES顺序排列的13种点数
    """
    return list(RANK_VALUES)


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.
    
    Returns:
        List[Suit]: 按SUIT_VALUES顺序排列的4种花色
    """
    return list(SUIT_VALUES)
