"""
The query layer: oracle answers -> beliefs -> a detective's notepad.

Nothing in here writes to the knowledge base.
"""

from dataclasses import dataclass
from enum import Enum

from .oracle import Entailment, KnowledgeBase
from .registry import Registry


class Belief(Enum):
    TRUE = "true"
    FALSE = "false"
    UNKNOWN = "unknown"

    @property
    def symbol(self) -> str:
        """Notepad glyph: Y (holds it), n (does not), - (unknown)."""
        return _SYMBOLS[self]

    @classmethod
    def from_entailment(cls, result: Entailment) -> "Belief":
        return _FROM_ENTAILMENT[result]


_SYMBOLS = {Belief.TRUE: "Y", Belief.FALSE: "n", Belief.UNKNOWN: "-"}

_FROM_ENTAILMENT = {
    Entailment.TRUE: Belief.TRUE,
    Entailment.FALSE: Belief.FALSE,
    Entailment.UNDETERMINED: Belief.UNKNOWN,
}


@dataclass(frozen=True)
class Notepad:
    """
    One snapshot of every (card, location) belief.

    rows:    cards, suspects then weapons then rooms
    columns: players in turn order, then the case file
    cells:   {card: {location: Belief}}
    """
    rows: tuple
    columns: tuple
    cells: dict
    case_file: str
    categories: dict

    # cells and categories are dicts
    __hash__ = None

    def cell(self, card, location) -> Belief:
        return self.cells[card][location]

    def row(self, card) -> tuple:
        return tuple(self.cells[card][loc] for loc in self.columns)

    def holdings(self, location) -> tuple:
        """Cards known to be at location."""
        return tuple(c for c in self.rows if self.cells[c][location] is Belief.TRUE)

    def solution(self) -> tuple:
        """Cards known to be in the case file."""
        return self.holdings(self.case_file)

    @property
    def is_solved(self) -> bool:
        """One known case-file card in each category."""
        known = set(self.solution())
        return all(
            sum(1 for card in cards if card in known) == 1
            for cards in self.categories.values()
        )

    def to_dict(self):
        return {
            "columns": list(self.columns),
            "rows": {
                card: {loc: self.cells[card][loc].symbol for loc in self.columns}
                for card in self.rows
            },
        }


def belief(kb: KnowledgeBase, registry: Registry, location, card) -> Belief:
    """TRUE / FALSE / UNKNOWN for 'card is at location'."""
    literal = registry.atom(location, card)
    return Belief.from_entailment(kb.test_literal(literal))


def snapshot(kb: KnowledgeBase, registry: Registry) -> Notepad:
    """
    Query every (location, card) pair.

    Up to 2 * num_locations * num_cards solver calls; the dominant cost
    of the whole system.
    """
    columns = registry.locations
    cells = {}
    for c, card in enumerate(registry.cards):
        cells[card] = {
            location: Belief.from_entailment(
                kb.test_literal(registry.atom_at(p, c))
            )
            for p, location in enumerate(columns)
        }
    return Notepad(
        rows=registry.cards,
        columns=columns,
        cells=cells,
        case_file=registry.case_file,
        categories=registry.categories,
    )
