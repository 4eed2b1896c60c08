from .errors import (
    ClueError, InvalidIdentifier, MalformedClause,
    PreconditionViolation, InconsistentKnowledge, ConfigurationError,
)
from .registry import GameConfig, Registry, CATEGORIES
from .clause import Clause, unit, check_literals
from .oracle import KnowledgeBase, Entailment, solver_names
from .query import Belief, Notepad, belief, snapshot

__all__ = [
    "ClueError", "InvalidIdentifier", "MalformedClause",
    "PreconditionViolation", "InconsistentKnowledge", "ConfigurationError",
    "GameConfig", "Registry", "CATEGORIES",
    "Clause", "unit", "check_literals",
    "KnowledgeBase", "Entailment", "solver_names",
    "Belief", "Notepad", "belief", "snapshot",
]
