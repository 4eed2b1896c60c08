"""
ClueReasoner: one game's knowledge base plus the operations that feed it.

    reasoner = ClueReasoner(GameConfig.classic())
    reasoner.hand("sc", ["wh", "li", "st"])
    reasoner.suggest("sc", "sc", "ro", "lo", refuter="mu", shown="sc")
    reasoner.belief("mu", "sc")        # Belief.TRUE
    reasoner.snapshot()                # Notepad over every (card, location)

Each event call and each snapshot holds the same lock, so a query never
sees an event half applied.
"""

from threading import RLock
from typing import Iterable, Optional
import logging

from .core.oracle import KnowledgeBase
from .core.query import Belief, Notepad, belief, snapshot
from .core.registry import GameConfig, Registry
from .encoding.axioms import structural_axioms
from .encoding.events import encode_accusation, encode_deal, encode_suggestion


logger = logging.getLogger(__name__)


class ClueReasoner:

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig.classic()
        self.registry = Registry(self.config)
        self.kb = KnowledgeBase(self.config.solver)
        self.perspective = None
        self.events = 0
        self._lock = RLock()

        axioms = structural_axioms(self.registry)
        self.kb.add_clauses(axioms)
        logger.info(
            "initialised %d players x %d cards: %d atoms, %d axiom clauses",
            self.registry.num_players, self.registry.num_cards,
            self.registry.num_atoms, len(axioms),
        )

    # ── Events ───────────────────────────────────────────────────────────────

    def hand(self, player, cards: Iterable):
        """Record the cards dealt to player; the first hand fixes our perspective."""
        cards = list(cards)
        with self._lock:
            clauses = encode_deal(self.registry, player, cards)
            self._commit(clauses, f"hand {player}: {' '.join(cards)}")
            if self.perspective is None:
                self.perspective = player

    def suggest(self, suggester, card1, card2, card3, refuter=None, shown=None):
        """Record a suggestion and its refutation (if any)."""
        with self._lock:
            clauses = encode_suggestion(
                self.registry, suggester, card1, card2, card3, refuter, shown,
            )
            if refuter is None:
                outcome = "not refuted"
            elif shown is None:
                outcome = f"refuted by {refuter}"
            else:
                outcome = f"refuted by {refuter} showing {shown}"
            self._commit(
                clauses,
                f"suggestion by {suggester}: {card1} {card2} {card3}, {outcome}",
            )

    def accuse(self, accuser, card1, card2, card3, correct: bool):
        """Record an accusation whose correctness is known."""
        with self._lock:
            clauses = encode_accusation(
                self.registry, accuser, card1, card2, card3, correct,
            )
            verdict = "correct" if correct else "wrong"
            self._commit(
                clauses,
                f"accusation by {accuser}: {card1} {card2} {card3}, {verdict}",
            )

    def _commit(self, clauses: list, description: str):
        self.kb.add_clauses(clauses)
        self.events += 1
        logger.info("event %d: %s (+%d clauses)", self.events, description, len(clauses))
        if logger.isEnabledFor(logging.DEBUG):
            for clause in clauses:
                logger.debug("  %s", clause.describe(self.registry))

    # ── Queries ──────────────────────────────────────────────────────────────

    def belief(self, location, card) -> Belief:
        with self._lock:
            return belief(self.kb, self.registry, location, card)

    def snapshot(self) -> Notepad:
        with self._lock:
            return snapshot(self.kb, self.registry)

    def solution(self) -> Optional[tuple]:
        """(suspect, weapon, room) if the case file is fully deduced, else None."""
        notepad = self.snapshot()
        if not notepad.is_solved:
            return None
        known = set(notepad.solution())
        return tuple(
            next(card for card in cards if card in known)
            for cards in self.registry.categories.values()
        )

    def is_consistent(self) -> bool:
        with self._lock:
            return self.kb.is_consistent()

    @property
    def clauses(self) -> tuple:
        return self.kb.clauses

    # ── Lifecycle ────────────────────────────────────────────────────────────

    def close(self):
        self.kb.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __repr__(self):
        return (f"ClueReasoner({self.registry.num_players} players, "
                f"{self.events} events, {len(self.kb)} clauses)")
