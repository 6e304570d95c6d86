"""牌组构建CLI.

提供 ``deck-builder`` 命令，按命令行选项构建一副牌并逐行打印。
"""

import logging
from typing import Optional, Tuple

import click

from deck_builder.core import Card, DeckConfig, DeckError, Rank, Suit
from deck_builder.controller import DeckSnapshot
from .render import DeckRenderer


def _parse_values(parser):
    """生成把多个文本参数逐个解析为枚举或卡牌的click回调."""
    def _callback(ctx: click.Context, param: click.Parameter, values: Tuple[str, ...]):
        try:
            return [parser(value) for value in values]
        except DeckError as e:
            raise click.BadParameter(str(e), ctx=ctx, param=param)
    return _callback


@click.command(name="deck-builder")
@click.option("--decks", type=click.IntRange(min=1), default=1, show_default=True,
              help="Number of standard decks to combine.")
@click.option("--jokers", type=click.IntRange(min=0), default=0, show_default=True,
              help="Number of jokers appended before shuffling.")
@click.option("--filter-rank", "filter_ranks", multiple=True, callback=_parse_values(Rank.from_str),
              help="Remove every card of this rank, e.g. Ace or 1. Repeatable.")
@click.option("--filter-suit", "filter_suits", multiple=True, callback=_parse_values(Suit.from_str),
              help="Remove every card of this suit, e.g. Hearts. Repeatable.")
@click.option("--filter-card", "filter_cards", multiple=True, callback=_parse_values(Card.from_str),
              help="Remove a specific card, e.g. 'Ace of Hearts'. Repeatable.")
@click.option("--shuffle/--no-shuffle", default=False, show_default=True)
@click.option("--sort/--no-sort", default=False, show_default=True,
              help="Apply the default Spade, Diamond, Club, Heart order last.")
@click.option("--seed", type=int, default=None, help="Seed for a reproducible shuffle.")
@click.option("--json", "as_json", is_flag=True, help="Print the deck as JSON.")
@click.option("--numbered", is_flag=True, help="Prefix each card with its position.")
@click.option("-v", "--verbose", is_flag=True, help="Log each pipeline step to stderr.")
def main(decks: int, jokers: int, filter_ranks, filter_suits, filter_cards,
         shuffle: bool, sort: bool, seed: Optional[int], as_json: bool,
         numbered: bool, verbose: bool) -> None:
    """Build a deck of playing cards and print it, one card per line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger = logging.getLogger(__name__)

    try:
        config = DeckConfig(
            decks=decks,
            jokers=jokers,
            filter_ranks=list(filter_ranks),
            filter_suits=list(filter_suits),
            filter_cards=list(filter_cards),
            shuffle=shuffle,
            sort=sort,
            random_seed=seed,
        )
    except DeckError as e:
        raise click.UsageError(str(e))

    cards = config.builder(logger=logger).build()
    logger.debug("Built %s", DeckRenderer.render_summary(cards))

    if as_json:
        click.echo(DeckSnapshot.from_cards(cards).to_json())
    elif cards:
        click.echo(DeckRenderer.render_deck(cards, numbered=numbered))


if __name__ == "__main__":
    main()
