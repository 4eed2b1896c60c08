"""
Clue: a propositional reasoner for the board game.

Every "card C is at location L" fact is a SAT atom. The rules of the game
become structural axioms; dealt hands, suggestions and accusations become
clauses; a SAT solver decides which facts are forced.

Usage:
    python -m clue --game classic
    python -m clue --game small --clauses
    python -m clue --transcript game.json --no-accusations
"""

from .core.errors import (
    ClueError, InvalidIdentifier, MalformedClause,
    PreconditionViolation, InconsistentKnowledge, ConfigurationError,
)
from .core.registry import GameConfig, Registry
from .core.clause import Clause
from .core.oracle import KnowledgeBase, Entailment
from .core.query import Belief, Notepad
from .encoding.axioms import structural_axioms
from .encoding.events import encode_deal, encode_suggestion, encode_accusation
from .reasoner import ClueReasoner
from .notepad import format_notepad, print_notepad, print_knowledge
from .games import GAMES, Transcript, replay

__all__ = [
    "ClueError", "InvalidIdentifier", "MalformedClause",
    "PreconditionViolation", "InconsistentKnowledge", "ConfigurationError",
    "GameConfig", "Registry", "Clause", "KnowledgeBase", "Entailment",
    "Belief", "Notepad",
    "structural_axioms", "encode_deal", "encode_suggestion", "encode_accusation",
    "ClueReasoner",
    "format_notepad", "print_notepad", "print_knowledge",
    "GAMES", "Transcript", "replay",
]
