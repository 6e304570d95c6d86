"""
deck_builder/controller/dto.py 的单元测试.

测试CardView和DeckSnapshot的创建、校验和JSON序列化。
"""

import json

import pytest
from pydantic import ValidationError

from deck_builder.controller import CardView, DeckSnapshot
from deck_builder.core import Card, Rank, Suit, jokers, new


class TestCardView:
    """CardView测试"""

    def test_from_card(self):
        """测试由普通牌创建"""
        view = CardView.from_card(Card(Suit.HEART, Rank.ACE))
        assert view.suit == "Heart"
        assert view.rank == "Ace"
        assert view.label == "Ace of Hearts"

    def test_from_joker(self):
        """测试由大小王创建"""
        view = CardView.from_card(Card.joker())
        assert view.suit == "Joker"
        assert view.rank is None
        assert view.label == "Joker"

    def test_invalid_suit(self):
        """测试无效花色被拒绝"""
        with pytest.raises(ValidationError):
            CardView(suit="Cups", rank="Ace", label="Ace of Cups")


class TestDeckSnapshot:
    """DeckSnapshot测试"""

    def test_from_cards(self):
        """测试由牌组创建快照"""
        snapshot = DeckSnapshot.from_cards(new(jokers(2)))
        assert snapshot.size == 54
        assert snapshot.joker_count == 2
        assert snapshot.cards[0].label == "Ace of Spades"

    def test_size_must_match(self):
        """测试牌数必须与列表长度一致"""
        view = CardView.from_card(Card(Suit.CLUB, Rank.TWO))
        with pytest.raises(ValidationError):
            DeckSnapshot(cards=[view], size=2)

    def test_empty(self):
        """测试空快照"""
        snapshot = DeckSnapshot.from_cards([])
        assert snapshot.size == 0
        assert snapshot.cards == []

    def test_to_json(self):
        """测试JSON序列化"""
        data = json.loads(DeckSnapshot.from_cards(new(jokers(1))).to_json())
        assert data["size"] == 53
        assert data["joker_count"] == 1
        assert data["cards"][-1] == {"suit": "Joker", "rank": None, "label": "Joker"}
        assert data["cards"][0] == {"suit": "Spade", "rank": "Ace", "label": "Ace of Spades"}
