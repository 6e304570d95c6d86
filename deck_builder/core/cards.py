"""
扑克牌数据结构.

定义不可变的Card类，提供显示字符串和文本解析.
"""

from dataclasses import dataclass
from typing import Optional

from .enums import Suit, Rank
from .exceptions import CardParseError, InvalidCardError


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，相等性和哈希由花色和点数共同决定.
    大小王(JOKER花色)不区分点数，构造时点数统一置为None，
    因此任意两张大小王相等.

    Attributes:
        suit: 花色
        rank: 点数，大小王为None

    Examples:
        >>> str(Card(Suit.HEART, Rank.ACE))
        'Ace of Hearts'
        >>> str(Card.joker())
        'Joker'
    """

    suit: Suit
    rank: Optional[Rank] = None

    def __post_init__(self) -> None:
        """
        验证并规范化卡牌数据.

        Raises:
            InvalidCardError: 当花色或点数类型无效，或普通牌缺少点数时
        """
        if not isinstance(self.suit, Suit):
            raise InvalidCardError(f"suit must be a Suit, got {type(self.suit).__name__}")

        if self.suit is Suit.JOKER:
            object.__setattr__(self, "rank", None)
            return

        if not isinstance(self.rank, Rank):
            raise InvalidCardError(
                f"{self.suit.name} card needs a Rank, got {type(self.rank).__name__}"
            )

    @classmethod
    def joker(cls) -> 'Card':
        """创建一张大小王."""
        return cls(Suit.JOKER)

    @property
    def is_joker(self) -> bool:
        """是否为大小王."""
        return self.suit is Suit.JOKER

    def __str__(self) -> str:
        """
        返回扑克牌的显示字符串.

        Returns:
            str: 普通牌为"<点数> of <花色>s"，如"Ace of Hearts"；大小王为"Joker"
        """
        if self.is_joker:
            return self.suit.label
        return f"{self.rank.label} of {self.suit.label}s"

    def __repr__(self) -> str:
        if self.is_joker:
            return "Card(JOKER)"
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从显示字符串创建扑克牌对象.

        与__str__互逆，不区分大小写，花色可用单数或复数.

        Args:
            card_str: 如"Ace of Hearts"、"ten of club"、"Joker"

        Returns:
            Card: 对应的扑克牌

        Raises:
            CardParseError: 当字符串格式无效时
        """
        if not isinstance(card_str, str):
            raise CardParseError(f"Card text must be a string, got {type(card_str).__name__}")

        words = card_str.split()
        if len(words) == 1 and Suit.from_str(words[0]) is Suit.JOKER:
            return cls.joker()

        if len(words) != 3 or words[1].lower() != "of":
            raise CardParseError(f"Expected '<rank> of <suit>', got {card_str!r}")

        rank = Rank.from_str(words[0])
        suit = Suit.from_str(words[2])
        if suit is Suit.JOKER:
            raise CardParseError(f"A joker has no rank: {card_str!r}")
        return cls(suit, rank)
