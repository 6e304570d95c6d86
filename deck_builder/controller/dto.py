"""数据传输对象定义.

这个模块定义了牌组与UI层之间传输数据的标准格式。
使用Pydantic dataclass确保数据验证和序列化的一致性。
"""

from typing import List, Optional

from pydantic import Field, TypeAdapter, ValidationInfo, field_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

from deck_builder.core import Card, Suit


@pydantic_dataclass
class CardView:
    """单张卡牌的展示数据.

    大小王的rank为None。
    """
    suit: str = Field(..., min_length=1, description="花色名称")
    label: str = Field(..., min_length=1, description="显示字符串，如Ace of Hearts")
    rank: Optional[str] = Field(None, description="点数名称")

    @field_validator('suit')
    @classmethod
    def validate_suit(cls, v: str) -> str:
        """验证花色名称是否有效."""
        Suit.from_str(v)
        return v

    @classmethod
    def from_card(cls, card: Card) -> 'CardView':
        """由Card创建展示数据."""
        return cls(
            suit=card.suit.label,
            rank=None if card.rank is None else card.rank.label,
            label=str(card),
        )


@pydantic_dataclass
class DeckSnapshot:
    """牌组快照.

    包含牌组在某个时刻的完整内容，用于显示或JSON输出。
    """
    cards: List[CardView] = Field(default_factory=list, description="按顺序排列的卡牌")
    size: int = Field(0, ge=0, description="牌数")
    joker_count: int = Field(0, ge=0, description="大小王数量")

    @field_validator('size')
    @classmethod
    def validate_size(cls, v: int, info: ValidationInfo) -> int:
        """验证牌数与卡牌列表长度一致."""
        cards = info.data.get('cards')
        if cards is not None and v != len(cards):
            raise ValueError(f"size {v} does not match {len(cards)} cards")
        return v

    @classmethod
    def from_cards(cls, cards: List[Card]) -> 'DeckSnapshot':
        """由卡牌列表创建快照."""
        views = [CardView.from_card(card) for card in cards]
        return cls(
            cards=views,
            size=len(views),
            joker_count=sum(1 for card in cards if card.is_joker),
        )

    def to_json(self, indent: Optional[int] = 2) -> str:
        """序列化为JSON字符串."""
        return _SNAPSHOT_ADAPTER.dump_json(self, indent=indent).decode("utf-8")


_SNAPSHOT_ADAPTER = TypeAdapter(DeckSnapshot)
