"""Card legality: whether a card may be played on the current discard."""

from typing import List, Optional, Sequence

from unotable.engine.card import Card, Color, Rank


def _blocks_wild_draw_four(other: Card, top_discard: Card, active_color: Color) -> bool:
    """A non-wild card in hand matching the active color or the top card's rank."""
    if other.is_wild:
        return False
    return other.color == active_color or other.rank == top_discard.rank


def can_play(
    card: Card,
    top_discard: Optional[Card],
    active_color: Color,
    hand: Sequence[Card],
) -> bool:
    """Check if card can be played from hand on top_discard."""
    # Wild can always be played
    if card.rank is Rank.WILD:
        return True
    if card.rank is Rank.WILD_DRAW_FOUR:
        # Only when nothing else in hand could be played by color or rank
        if top_discard is None:
            return True
        return not any(
            _blocks_wild_draw_four(other, top_discard, active_color)
            for other in hand
            if other is not card
        )
    if top_discard is None:
        return True
    # Match by color
    if card.color == active_color:
        return True
    # Match by rank
    return card.rank == top_discard.rank


def has_legal_move(hand: Sequence[Card], top_discard: Optional[Card], active_color: Color) -> bool:
    """Return True if any card in hand can be played."""
    return any(can_play(card, top_discard, active_color, hand) for card in hand)


def playable_indices(hand: Sequence[Card], top_discard: Optional[Card], active_color: Color) -> List[int]:
    """Hand indices of every playable card, left to right."""
    return [i for i, card in enumerate(hand) if can_play(card, top_discard, active_color, hand)]
