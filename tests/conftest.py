"""
Deck builder pytest配置文件.

提供通用的测试fixture和测试标记定义。
"""

import random

import pytest

from deck_builder.core import Card, Rank, Suit, base_deck


@pytest.fixture
def full_deck():
    """标准顺序的52张牌"""
    return base_deck()


@pytest.fixture
def ace_of_hearts():
    """红桃A"""
    return Card(Suit.HEART, Rank.ACE)


@pytest.fixture
def seeded_rng():
    """固定种子的随机数生成器，用于可重现的洗牌"""
    return random.Random(20240101)


def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "cli: 标记命令行界面测试"
    )
