"""
The clause value type.

A Clause is an ordered tuple of non-zero signed atom ids: positive asserts
the atom, negative asserts its negation. Semantically a disjunction.
The label says which axiom family or game event produced it.
"""

from dataclasses import dataclass

from .errors import MalformedClause


@dataclass(frozen=True)
class Clause:
    literals: tuple
    label: str = ""

    def __post_init__(self):
        object.__setattr__(self, "literals", tuple(self.literals))
        check_literals(self.literals)

    @property
    def is_unit(self):
        return len(self.literals) == 1

    def describe(self, registry) -> str:
        """Render with location/card names, e.g. '[deal] ~wh@cf'."""
        name = " | ".join(registry.describe_literal(lit) for lit in self.literals)
        if self.label:
            name = f"[{self.label}] {name}"
        return name

    def __iter__(self):
        return iter(self.literals)

    def __len__(self):
        return len(self.literals)

    def __repr__(self):
        return f"Clause({list(self.literals)}, {self.label!r})"


def check_literals(literals):
    """Raise MalformedClause unless literals is a non-empty run of non-zero ints."""
    if not literals:
        raise MalformedClause("empty clause")
    for lit in literals:
        # bool is an int subclass but never a valid literal
        if isinstance(lit, bool) or not isinstance(lit, int):
            raise MalformedClause(f"non-integer literal {lit!r} in {list(literals)}")
        if lit == 0:
            raise MalformedClause(f"zero literal in {list(literals)}")


def unit(literal: int, label: str = "") -> Clause:
    return Clause((literal,), label)
