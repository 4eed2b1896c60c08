"""
Structural axioms: what holds in every game of Clue before anyone moves.

    existence              every card is somewhere (some player or the case file)
    exclusivity            no card is in two places
    solution existence     the case file holds at least one card per category
    solution uniqueness    the case file holds at most one card per category

Existence + exclusivity pin every card to exactly one location.
Solution existence + uniqueness pin the case file to exactly one suspect,
one weapon and one room.
"""

from itertools import combinations

from ..core.clause import Clause
from ..core.registry import Registry


def existence_axioms(registry: Registry) -> list:
    """card_1@p_0 | card_1@p_1 | ... | card_1@cf, for every card."""
    return [
        Clause(
            tuple(registry.atom_at(p, c) for p in range(registry.num_locations)),
            label=f"{card} is somewhere",
        )
        for c, card in enumerate(registry.cards)
    ]


def exclusivity_axioms(registry: Registry) -> list:
    """~card@p | ~card@q, for every card and every pair of locations p != q."""
    clauses = []
    for c, card in enumerate(registry.cards):
        for p, q in combinations(range(registry.num_locations), 2):
            clauses.append(Clause(
                (-registry.atom_at(p, c), -registry.atom_at(q, c)),
                label=f"{card} is in one place",
            ))
    return clauses


def solution_existence_axioms(registry: Registry) -> list:
    cf = registry.case_file
    return [
        Clause(
            tuple(registry.atom(cf, card) for card in cards),
            label=f"case file holds one of the {category}",
        )
        for category, cards in registry.categories.items()
    ]


def solution_uniqueness_axioms(registry: Registry) -> list:
    cf = registry.case_file
    clauses = []
    for category, cards in registry.categories.items():
        for a, b in combinations(cards, 2):
            clauses.append(Clause(
                (-registry.atom(cf, a), -registry.atom(cf, b)),
                label=f"case file holds at most one of the {category}",
            ))
    return clauses


AXIOM_FAMILIES = (
    existence_axioms,
    exclusivity_axioms,
    solution_existence_axioms,
    solution_uniqueness_axioms,
)


def structural_axioms(registry: Registry) -> list:
    """All four families, in the order listed above."""
    clauses = []
    for family in AXIOM_FAMILIES:
        clauses.extend(family(registry))
    return clauses
