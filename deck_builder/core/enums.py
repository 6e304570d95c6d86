"""
扑克牌花色与点数枚举定义.

包含标准牌组使用的花色、点数枚举，以及按标签解析的辅助方法.
"""

from enum import Enum, IntEnum
from typing import List

from .exceptions import CardParseError


class Suit(Enum):
    """
    扑克牌花色枚举.

    四种标准花色加上一个JOKER哨兵花色. JOKER不是可用于比较的正常花色，
    持有JOKER花色的牌忽略其点数.
    """

    SPADE = "Spade"        # 黑桃
    DIAMOND = "Diamond"    # 方块
    CLUB = "Club"          # 梅花
    HEART = "Heart"        # 红桃
    JOKER = "Joker"        # 大小王

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """返回花色的显示名称, 如"Heart"."""
        return self.value

    @property
    def is_standard(self) -> bool:
        """是否为四种标准花色之一."""
        return self is not Suit.JOKER

    @classmethod
    def from_str(cls, suit_str: str) -> 'Suit':
        """
        从显示名称解析花色.

        不区分大小写，同时接受单数和复数形式，如"heart"、"Hearts".

        Args:
            suit_str: 花色名称

        Returns:
            Suit: 对应的花色

        Raises:
            CardParseError: 当名称无法识别时
        """
        text = suit_str.strip().lower()
        for suit in cls:
            name = suit.value.lower()
            if text in (name, name + "s"):
                return suit
        raise CardParseError(f"Unknown suit: {suit_str!r}")


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    ACE为1, KING为13. 数值0保留不用，大小王没有点数.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return self.label

    @property
    def label(self) -> str:
        """返回点数的显示名称, 如"Ace"、"Ten"."""
        return self.name.capitalize()

    @classmethod
    def from_str(cls, rank_str: str) -> 'Rank':
        """
        从显示名称或数字解析点数.

        Args:
            rank_str: 点数名称，如"Ace"、"queen"，或数字"1"到"13"

        Returns:
            Rank: 对应的点数

        Raises:
            CardParseError: 当名称无法识别时
        """
        text = rank_str.strip()
        if text.isdigit():
            try:
                return cls(int(text))
            except ValueError:
                raise CardParseError(f"Rank out of range: {rank_str!r}") from None

        try:
            return cls[text.upper()]
        except KeyError:
            raise CardParseError(f"Unknown rank: {rank_str!r}") from None


def get_all_suits() -> List[Suit]:
    """
    获取所有标准花色.

    Returns:
        List[Suit]: 按枚举顺序排列的四种标准花色，不含JOKER
    """
    return [suit for suit in Suit if suit.is_standard]


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 从ACE到KING的13种点数
    """
    return list(Rank)
