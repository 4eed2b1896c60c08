"""
Error taxonomy.

Every failure the reasoner can report derives from ClueError. The mixin
bases let callers that only know the builtin categories still catch them:
an unknown name is a KeyError, a bad event is a ValueError, a malformed
clause is an AssertionError because it can only come from an encoder bug.
"""


class ClueError(Exception):
    """Base class for everything the reasoner raises on purpose."""


class InvalidIdentifier(ClueError, KeyError):
    """An unrecognised location or card name."""

    def __init__(self, kind: str, name):
        self.kind = kind
        self.name = name
        super().__init__(f"illegal {kind}: {name!r}")

    def __str__(self):
        # KeyError.__str__ would repr() the message
        return self.args[0]


class MalformedClause(ClueError, AssertionError):
    """An empty clause, or one holding a zero / non-integer literal."""


class PreconditionViolation(ClueError, ValueError):
    """A structurally inconsistent event, e.g. a shown card with no refuter."""


class InconsistentKnowledge(ClueError):
    """
    The knowledge base has no model.

    Either a player broke the rules or an encoder is wrong. Either way the
    game instance cannot answer further queries.
    """


class ConfigurationError(ClueError, ValueError):
    """Invalid game configuration or transcript."""
