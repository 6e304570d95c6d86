"""牌组CLI渲染模块.

这个模块负责将牌组渲染为命令行文本，
实现显示逻辑与牌组构建逻辑的分离。
"""

from typing import List

from deck_builder.core import Card


class DeckRenderer:
    """CLI渲染器.

    所有渲染方法都是纯函数，仅依赖传入的卡牌列表。
    """

    @staticmethod
    def render_deck(cards: List[Card], numbered: bool = False) -> str:
        """渲染牌组，每行一张牌.

        Args:
            cards: 牌组
            numbered: 是否在每行前加序号

        Returns:
            格式化的牌组字符串，空牌组返回空字符串
        """
        if not numbered:
            return "\n".join(str(card) for card in cards)

        width = len(str(len(cards)))
        return "\n".join(
            f"{i:>{width}}. {card}" for i, card in enumerate(cards, 1)
        )

    @staticmethod
    def render_summary(cards: List[Card]) -> str:
        """渲染牌组概要，如"54 cards (2 jokers)"."""
        joker_count = sum(1 for card in cards if card.is_joker)
        noun = "card" if len(cards) == 1 else "cards"
        if not joker_count:
            return f"{len(cards)} {noun}"
        return f"{len(cards)} {noun} ({joker_count} joker{'' if joker_count == 1 else 's'})"
