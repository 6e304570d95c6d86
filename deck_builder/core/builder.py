"""
牌组构建器.

先生成标准52张牌，再按顺序把每个选项的输出作为下一个选项的输入.
"""

import logging
from typing import List, Optional

from .cards import Card
from .enums import get_all_suits, get_all_ranks
from .options import Transform


def base_deck() -> List[Card]:
    """
    生成未经变换的标准牌组.

    外层按花色(黑桃、方块、梅花、红桃)，内层按点数(ACE到KING)，
    共52张，不含大小王. 每次调用返回新列表.

    Returns:
        List[Card]: 标准牌组
    """
    return [
        Card(suit, rank)
        for suit in get_all_suits()
        for rank in get_all_ranks()
    ]


class DeckBuilder:
    """
    牌组构建器.

    保存一组有序的变换选项，build()时从标准牌组开始依次应用.

    Examples:
        >>> cards = DeckBuilder().add(jokers(2)).add(shuffle).build()
        >>> len(cards)
        54
    """

    def __init__(self, *options: Transform, logger: Optional[logging.Logger] = None):
        """
        初始化构建器.

        Args:
            *options: 初始变换选项
            logger: 可选的日志记录器
        """
        self._options: List[Transform] = list(options)
        self.logger = logger or logging.getLogger(__name__)

    def add(self, option: Transform) -> 'DeckBuilder':
        """追加一个变换选项，返回构建器本身以便链式调用."""
        self._options.append(option)
        return self

    @property
    def options(self) -> List[Transform]:
        """当前的变换选项列表(副本)."""
        return list(self._options)

    def build(self) -> List[Card]:
        """
        构建牌组.

        Returns:
            List[Card]: 应用全部选项后的牌组
        """
        deck = base_deck()
        for step, option in enumerate(self._options, 1):
            deck = option(deck)
            self.logger.debug(
                "Step %d %s -> %d cards",
                step, getattr(option, "__qualname__", repr(option)), len(deck)
            )
        return deck

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        return f"DeckBuilder(options={len(self._options)})"


def new(*options: Transform) -> List[Card]:
    """
    创建一副牌.

    不传选项时返回标准顺序的52张牌.

    Args:
        *options: 依次应用的变换选项，如 ``new(jokers(2), shuffle)``

    Returns:
        List[Card]: 构建好的牌组
    """
    return DeckBuilder(*options).build()
