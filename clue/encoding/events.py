"""
Event encoders: one observed game event -> the clauses it justifies.

Each encoder is a pure function of the registry and the event. It resolves
every name and checks every precondition before building anything, and
returns the complete clause list; committing that list to the knowledge
base is the caller's job. A rejected event therefore never leaves a
partial clause set behind.
"""

from typing import Iterable, Optional

from ..core.clause import Clause, unit
from ..core.errors import PreconditionViolation
from ..core.registry import Registry


def _require_player(registry: Registry, name, role: str) -> int:
    index = registry.location_index(name)
    if not registry.is_player(name):
        raise PreconditionViolation(f"the case file cannot be the {role}")
    return index


def _require_cards(registry: Registry, cards) -> tuple:
    for card in cards:
        registry.card_index(card)
    return tuple(cards)


def _exclude(registry: Registry, player, cards, label: str) -> list:
    return [unit(-registry.atom(player, card), label) for card in cards]


# ── Deal ─────────────────────────────────────────────────────────────────────

def encode_deal(registry: Registry, owner, cards: Iterable) -> list:
    """
    The reasoner's own hand: each card is held by owner, so not in the case file.

    Private first-person knowledge, not a public game event.
    """
    _require_player(registry, owner, "hand owner")
    cards = _require_cards(registry, list(cards))
    if not cards:
        raise PreconditionViolation(f"empty hand dealt to {owner!r}")

    cf = registry.case_file
    clauses = []
    for card in cards:
        clauses.append(unit(-registry.atom(cf, card), f"{card} dealt to {owner}"))
        clauses.append(unit(registry.atom(owner, card), f"{card} dealt to {owner}"))
    return clauses


# ── Suggestion ───────────────────────────────────────────────────────────────

def encode_suggestion(
    registry: Registry,
    suggester,
    card1,
    card2,
    card3,
    refuter=None,
    shown: Optional[str] = None,
) -> list:
    """
    A suggestion of three cards and how it was (or wasn't) refuted.

    No refuter: no player other than the suggester holds any of the three.
    The case file is left open: the suggester may have named the solution.

    Refuter: every player strictly between suggester and refuter, clockwise,
    holds none of the three. The refuter holds the shown card if we saw it,
    otherwise at least one of the three.
    """
    suggester_index = _require_player(registry, suggester, "suggester")
    suggested = _require_cards(registry, (card1, card2, card3))

    if shown is not None and refuter is None:
        raise PreconditionViolation(
            f"card {shown!r} shown but no refuter given"
        )

    if refuter is None:
        label = f"nobody refuted {suggester}"
        clauses = []
        for player in registry.players:
            if player != suggester:
                clauses.extend(_exclude(registry, player, suggested, label))
        return clauses

    refuter_index = _require_player(registry, refuter, "refuter")
    if refuter_index == suggester_index:
        raise PreconditionViolation(f"{suggester!r} cannot refute their own suggestion")
    if shown is not None:
        registry.card_index(shown)
        if shown not in suggested:
            raise PreconditionViolation(
                f"shown card {shown!r} was not suggested ({', '.join(suggested)})"
            )

    clauses = []
    i = registry.next_player(suggester_index)
    while i != refuter_index:
        player = registry.players[i]
        clauses.extend(_exclude(
            registry, player, suggested,
            label=f"{player} could not refute {suggester}",
        ))
        i = registry.next_player(i)

    if shown is not None:
        label = f"{refuter} showed {shown}"
        clauses.append(unit(registry.atom(refuter, shown), label))
        clauses.append(unit(-registry.atom(registry.case_file, shown), label))
    else:
        clauses.append(Clause(
            tuple(registry.atom(refuter, card) for card in suggested),
            label=f"{refuter} refuted {suggester}",
        ))
    return clauses


# ── Accusation ───────────────────────────────────────────────────────────────

def encode_accusation(
    registry: Registry,
    accuser,
    card1,
    card2,
    card3,
    correct: bool,
) -> list:
    """
    Correct: the case file holds all three cards.
    Incorrect: it does not hold all three, as one clause of three negations.
    Two of the three may still be right, so no single card is excluded.
    """
    _require_player(registry, accuser, "accuser")
    accused = _require_cards(registry, (card1, card2, card3))
    cf = registry.case_file

    if correct:
        return [
            unit(registry.atom(cf, card), f"{accuser} accused correctly")
            for card in accused
        ]
    return [Clause(
        tuple(-registry.atom(cf, card) for card in accused),
        label=f"{accuser} accused wrongly",
    )]
