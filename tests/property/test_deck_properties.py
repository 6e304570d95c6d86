"""
Property-based Tests for Deck Transforms - 牌组变换属性测试

该模块使用hypothesis进行基于属性的测试，确保任意选项组合下
牌组变换都满足计数、顺序和排序不变量。
"""

from collections import Counter
from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from deck_builder.core import (
    Card, Rank, Suit, abs_rank, base_deck, default_sort, filter_rank,
    filter_specific, filter_suit, jokers, multiple_decks, new, shuffle_with,
)


# Hypothesis策略定义
suit_strategy = st.sampled_from(list(Suit))
rank_strategy = st.sampled_from(list(Rank))
card_strategy = st.one_of(
    st.builds(Card, st.sampled_from([s for s in Suit if s.is_standard]), rank_strategy),
    st.just(Card.joker()),
)
deck_strategy = st.lists(card_strategy, max_size=120)


def _option_strategy():
    """随机生成一个变换选项"""
    return st.one_of(
        st.integers(min_value=-1, max_value=3).map(multiple_decks),
        st.integers(min_value=-1, max_value=4).map(jokers),
        st.lists(rank_strategy, max_size=3).map(lambda rs: filter_rank(*rs)),
        st.lists(suit_strategy, max_size=2).map(lambda ss: filter_suit(*ss)),
        st.lists(card_strategy, max_size=3).map(lambda cs: filter_specific(*cs)),
        st.integers(min_value=0, max_value=2 ** 32).map(lambda seed: shuffle_with(seed=seed)),
        st.just(default_sort),
    )


@pytest.mark.property_test
@given(deck_strategy)
def test_default_sort_idempotent(cards: List[Card]):
    """Property test: 排序两次与排序一次结果相同"""
    once = default_sort(list(cards))
    assert default_sort(list(once)) == once


@pytest.mark.property_test
@given(deck_strategy)
def test_default_sort_groups_suits_in_order(cards: List[Card]):
    """Property test: 排序后花色依次为黑桃、方块、梅花、红桃、大小王，花色内点数升序"""
    suit_order = [Suit.SPADE, Suit.DIAMOND, Suit.CLUB, Suit.HEART, Suit.JOKER]
    result = default_sort(list(cards))

    keys = [(suit_order.index(c.suit), 0 if c.rank is None else int(c.rank)) for c in result]
    assert keys == sorted(keys)
    assert [abs_rank(c) for c in result] == sorted(abs_rank(c) for c in cards)


@pytest.mark.property_test
@given(deck_strategy, st.integers(min_value=0, max_value=2 ** 32))
def test_shuffle_preserves_multiset(cards: List[Card], seed: int):
    """Property test: 洗牌不增减任何牌"""
    assert Counter(shuffle_with(seed=seed)(list(cards))) == Counter(cards)


@pytest.mark.property_test
@given(deck_strategy, st.integers(min_value=-2, max_value=5))
def test_multiple_decks_counts(cards: List[Card], n: int):
    """Property test: n副牌中每张牌出现次数乘以max(n, 1)"""
    result = multiple_decks(n)(list(cards))
    factor = max(n, 1)
    assert len(result) == len(cards) * factor
    assert result[:len(cards)] == cards
    assert Counter(result) == Counter({c: k * factor for c, k in Counter(cards).items()})


@pytest.mark.property_test
@given(deck_strategy, st.lists(suit_strategy, max_size=4))
def test_filter_suit_is_stable(cards: List[Card], suits: List[Suit]):
    """Property test: 过滤只移除匹配的牌并保持剩余顺序"""
    result = filter_suit(*suits)(list(cards))
    assert result == [c for c in cards if c.suit not in suits]


@pytest.mark.property_test
@given(deck_strategy, st.lists(rank_strategy, max_size=4))
def test_filter_rank_is_stable(cards: List[Card], ranks: List[Rank]):
    """Property test: 点数过滤保持剩余顺序，且不移除大小王"""
    result = filter_rank(*ranks)(list(cards))
    assert result == [c for c in cards if c.rank not in ranks]
    assert sum(c.is_joker for c in result) == sum(c.is_joker for c in cards)


@pytest.mark.property_test
@settings(max_examples=50)
@given(st.lists(_option_strategy(), max_size=5))
def test_pipeline_only_contains_known_cards(options):
    """Property test: 任意选项组合只会产生标准牌或大小王"""
    allowed = set(base_deck()) | {Card.joker()}
    assert set(new(*options)) <= allowed
