"""
牌组配置.

用一个dataclass描述常用的牌组构建参数，并编译为有序的变换选项列表.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .builder import DeckBuilder
from .cards import Card
from .enums import Suit, Rank
from .exceptions import DeckConfigError
from .options import (
    Transform, default_sort, filter_rank, filter_specific, filter_suit,
    jokers, multiple_decks, shuffle, shuffle_with,
)


@dataclass
class DeckConfig:
    """
    牌组配置类.

    选项的应用顺序固定为: 多副牌、过滤、添加大小王、洗牌、排序.
    """
    decks: int = 1                          # 牌组副数
    jokers: int = 0                         # 大小王数量
    filter_ranks: List[Rank] = field(default_factory=list)
    filter_suits: List[Suit] = field(default_factory=list)
    filter_cards: List[Card] = field(default_factory=list)
    shuffle: bool = False
    sort: bool = False

    # 测试设置
    random_seed: Optional[int] = None       # 随机种子，仅在shuffle为True时生效

    def __post_init__(self):
        """验证配置的有效性"""
        self._validate_counts()
        self._validate_filters()

    def _validate_counts(self):
        """验证数量设置"""
        if not isinstance(self.decks, int) or self.decks < 1:
            raise DeckConfigError(f"decks must be a positive integer: {self.decks!r}")

        if not isinstance(self.jokers, int) or self.jokers < 0:
            raise DeckConfigError(f"jokers must be a non-negative integer: {self.jokers!r}")

        if self.random_seed is not None and not isinstance(self.random_seed, int):
            raise DeckConfigError(f"random_seed must be an integer: {self.random_seed!r}")

    def _validate_filters(self):
        """验证过滤列表的元素类型，并拒绝对大小王的过滤"""
        checks = (
            ("filter_ranks", self.filter_ranks, Rank),
            ("filter_suits", self.filter_suits, Suit),
            ("filter_cards", self.filter_cards, Card),
        )
        for name, values, expected in checks:
            for value in values:
                if not isinstance(value, expected):
                    raise DeckConfigError(
                        f"{name} expects {expected.__name__} values, got {value!r}"
                    )

        # 大小王在过滤之后才加入，过滤大小王不会生效
        if Suit.JOKER in self.filter_suits:
            raise DeckConfigError("filter_suits cannot remove jokers, set jokers=0 instead")
        if any(card.is_joker for card in self.filter_cards):
            raise DeckConfigError("filter_cards cannot remove jokers, set jokers=0 instead")

    @property
    def expected_size(self) -> Optional[int]:
        """不含过滤时的牌数；有过滤时返回None."""
        if self.filter_ranks or self.filter_suits or self.filter_cards:
            return None
        return 52 * self.decks + self.jokers

    def to_options(self) -> List[Transform]:
        """
        编译为变换选项列表.

        Returns:
            List[Transform]: 按固定顺序排列的选项
        """
        options: List[Transform] = []
        if self.decks > 1:
            options.append(multiple_decks(self.decks))
        if self.filter_ranks:
            options.append(filter_rank(*self.filter_ranks))
        if self.filter_suits:
            options.append(filter_suit(*self.filter_suits))
        if self.filter_cards:
            options.append(filter_specific(*self.filter_cards))
        if self.jokers:
            options.append(jokers(self.jokers))
        if self.shuffle:
            if self.random_seed is not None:
                options.append(shuffle_with(seed=self.random_seed))
            else:
                options.append(shuffle)
        if self.sort:
            options.append(default_sort)
        return options

    def builder(self, logger=None) -> DeckBuilder:
        """返回装载了本配置选项的构建器"""
        return DeckBuilder(*self.to_options(), logger=logger)

    def build(self) -> List[Card]:
        """按配置构建牌组"""
        return self.builder().build()

    @classmethod
    def standard(cls) -> 'DeckConfig':
        """标准52张牌，出厂顺序"""
        return cls()

    @classmethod
    def shuffled(cls, jokers: int = 0, random_seed: Optional[int] = None) -> 'DeckConfig':
        """
        创建洗好的牌组配置.

        Args:
            jokers: 大小王数量，在洗牌前加入
            random_seed: 可选的随机种子
        """
        return cls(jokers=jokers, shuffle=True, random_seed=random_seed)
