"""
牌组变换选项.

每个选项都是一个 ``List[Card] -> List[Card]`` 的可调用对象，
由构建器按传入顺序依次应用. 选项可以原地修改输入列表并返回它.

包含洗牌、默认排序、过滤、添加大小王、多副牌组合，以及默认排序使用的比较函数.
"""

import logging
import random
from typing import Callable, Dict, List, Optional

from .cards import Card
from .enums import Suit, Rank

logger = logging.getLogger(__name__)

Transform = Callable[[List[Card]], List[Card]]

RANKS_PER_SUIT = 13
JOKER_RANK_ORDINAL = 1

# 仅供比较函数使用的花色序号，不属于卡牌身份的一部分
_SUIT_ORDINALS: Dict[Suit, int] = {
    Suit.SPADE: 0,
    Suit.DIAMOND: 1,
    Suit.CLUB: 2,
    Suit.HEART: 3,
    Suit.JOKER: 4,
}


def abs_rank(card: Card) -> int:
    """
    计算卡牌的绝对点数，用作默认排序键.

    绝对点数 = 花色序号 * 13 + 点数序号. 花色序号依次为
    SPADE=0, DIAMOND=1, CLUB=2, HEART=3, JOKER=4; 点数序号ACE=1..KING=13,
    大小王没有点数，统一取点数序号1，使其排在红桃K(绝对点数52)之后.

    Args:
        card: 卡牌

    Returns:
        int: 绝对点数
    """
    rank_ordinal = JOKER_RANK_ORDINAL if card.rank is None else int(card.rank)
    return _SUIT_ORDINALS[card.suit] * RANKS_PER_SUIT + rank_ordinal


def less(a: Card, b: Card) -> bool:
    """如果a按默认顺序排在b之前则返回True."""
    return abs_rank(a) < abs_rank(b)


def shuffle(cards: List[Card]) -> List[Card]:
    """
    洗牌.

    每次调用都创建一个由系统熵源播种的新随机数生成器，
    用Fisher-Yates算法生成均匀随机排列. 返回新列表，不修改输入.

    Args:
        cards: 牌组

    Returns:
        List[Card]: 打乱顺序后的新牌组
    """
    return _shuffled(cards, random.Random())


def shuffle_with(rng: Optional[random.Random] = None, seed: Optional[int] = None) -> Transform:
    """
    创建使用指定随机数生成器或种子的洗牌选项，用于可重现的牌组.

    Args:
        rng: 随机数生成器，调用方负责不在多个线程间共享
        seed: 随机种子，仅在未提供rng时使用

    Returns:
        Transform: 洗牌选项
    """
    if rng is None:
        rng = random.Random(seed)

    def _shuffle(cards: List[Card]) -> List[Card]:
        return _shuffled(cards, rng)

    return _shuffle


def _shuffled(cards: List[Card], rng: random.Random) -> List[Card]:
    deck = list(cards)
    rng.shuffle(deck)
    logger.debug("Shuffled %d cards", len(deck))
    return deck


def default_sort(cards: List[Card]) -> List[Card]:
    """
    按新牌出厂顺序排序.

    顺序为黑桃、方块、梅花、红桃，每种花色内从ACE到KING，大小王排在最后.
    使用稳定排序，绝对点数相同的牌(如多张大小王)保持原有相对顺序.

    Args:
        cards: 牌组

    Returns:
        List[Card]: 原地排序后的同一列表
    """
    cards.sort(key=abs_rank)
    return cards


def sort_by(key: Callable[[Card], int] = abs_rank, reverse: bool = False) -> Transform:
    """
    创建自定义排序选项.

    Args:
        key: 排序键函数，默认为abs_rank
        reverse: 是否逆序

    Returns:
        Transform: 稳定排序选项
    """
    def _sort(cards: List[Card]) -> List[Card]:
        cards.sort(key=key, reverse=reverse)
        return cards

    return _sort


def filter_rank(*ranks: Rank) -> Transform:
    """
    创建移除指定点数的过滤选项.

    每个点数单独过滤一遍并原地压缩列表，保留剩余牌的相对顺序.
    不传参数时不做任何过滤. 大小王没有点数，不会被点数过滤移除.

    Args:
        *ranks: 要移除的点数，如 ``filter_rank(Rank.ACE, Rank.KING)``

    Returns:
        Transform: 过滤选项
    """
    def _filter(cards: List[Card]) -> List[Card]:
        for rank in ranks:
            cards[:] = [c for c in cards if c.rank != rank]
        return cards

    return _filter


def filter_suit(*suits: Suit) -> Transform:
    """
    创建移除指定花色的过滤选项.

    Args:
        *suits: 要移除的花色，``filter_suit(Suit.JOKER)`` 移除所有大小王

    Returns:
        Transform: 过滤选项
    """
    def _filter(cards: List[Card]) -> List[Card]:
        for suit in suits:
            cards[:] = [c for c in cards if c.suit is not suit]
        return cards

    return _filter


def filter_specific(*specific: Card) -> Transform:
    """
    创建移除指定卡牌的过滤选项.

    Args:
        *specific: 要移除的卡牌，如 ``filter_specific(Card(Suit.HEART, Rank.ACE))``

    Returns:
        Transform: 过滤选项
    """
    def _filter(cards: List[Card]) -> List[Card]:
        for card in specific:
            cards[:] = [c for c in cards if c != card]
        return cards

    return _filter


def jokers(n: int) -> Transform:
    """
    创建在牌组末尾添加n张大小王的选项.

    如果希望大小王被随机洗入牌组，需要把它放在shuffle之前.
    n小于等于0时不做任何修改.

    Args:
        n: 大小王数量

    Returns:
        Transform: 添加大小王选项
    """
    def _add_jokers(cards: List[Card]) -> List[Card]:
        cards.extend(Card.joker() for _ in range(n))
        return cards

    return _add_jokers


def multiple_decks(n: int) -> Transform:
    """
    创建把牌组复制为n副的选项.

    结果为原牌组后接n-1份按原顺序的副本. n小于等于1(包括0)时返回原牌组.

    Args:
        n: 牌组副数

    Returns:
        Transform: 多副牌选项
    """
    def _multiply(cards: List[Card]) -> List[Card]:
        original = list(cards)
        for _ in range(1, n):
            cards.extend(original)
        return cards

    return _multiply
