"""
The satisfiability oracle.

KnowledgeBase wraps an incremental pysat solver behind the two primitives
the reasoner needs:

    add_clause(literals)    conjoin one disjunction, permanently
    test_literal(literal)   is it entailed, is its negation, or neither?

Entailment is checked by refutation: the literal is entailed exactly when
the knowledge base plus its negation has no model. Both checks run as
solver assumptions, so nothing is added to the solver by a query.
"""

from enum import Enum
from typing import Iterable, Iterator, Optional
import logging

from pysat.solvers import Solver, SolverNames

from .clause import Clause, check_literals
from .errors import ConfigurationError, InconsistentKnowledge, MalformedClause


logger = logging.getLogger(__name__)


class Entailment(Enum):
    TRUE = "entailed"
    FALSE = "negation entailed"
    UNDETERMINED = "undetermined"


def _as_clause(literals) -> Clause:
    if isinstance(literals, Clause):
        return literals
    # a bare int or str would otherwise iterate oddly or not at all
    if isinstance(literals, (int, str)):
        raise MalformedClause(f"expected a sequence of literals, got {literals!r}")
    return Clause(tuple(literals))


def solver_names() -> set:
    """Every solver name pysat accepts, e.g. 'g3', 'glucose3', 'cd19'."""
    names = set()
    for value in vars(SolverNames).values():
        if isinstance(value, tuple):
            names.update(value)
    return names


class KnowledgeBase:
    """
    Append-only conjunction of clauses, backed by one live pysat solver.

    Every clause added is also recorded, so models can be enumerated on a
    throwaway solver without disturbing the live one.
    """

    def __init__(self, solver: str = "glucose3"):
        if solver not in solver_names():
            raise ConfigurationError(f"unknown SAT solver {solver!r}")
        self.solver_name = solver
        self._solver = Solver(name=solver)
        self._clauses = []

    # ── Writing ──────────────────────────────────────────────────────────────

    def add_clause(self, literals: Iterable[int]):
        """Conjoin one disjunction. Raises MalformedClause on bad input."""
        self._commit(_as_clause(literals))

    def add_clauses(self, clauses: Iterable):
        """
        Conjoin a batch of clauses, all or nothing.

        Every clause is validated before the first one reaches the solver,
        so a malformed member leaves the knowledge base untouched.
        """
        batch = [_as_clause(c) for c in clauses]
        for clause in batch:
            self._commit(clause)

    def _commit(self, clause: Clause):
        self._ensure_open()
        self._solver.add_clause(list(clause.literals))
        self._clauses.append(clause)

    # ── Reading ──────────────────────────────────────────────────────────────

    @property
    def clauses(self) -> tuple:
        """Every clause added so far, in order."""
        return tuple(self._clauses)

    def __len__(self):
        return len(self._clauses)

    def is_consistent(self) -> bool:
        self._ensure_open()
        return self._solver.solve()

    def test_literal(self, literal: int) -> Entailment:
        """
        Classify a literal against the current knowledge base.

        Raises InconsistentKnowledge if neither the literal nor its negation
        is satisfiable, i.e. the knowledge base itself has no model.
        """
        check_literals([literal])
        self._ensure_open()
        can_be_true = self._solver.solve(assumptions=[literal])
        can_be_false = self._solver.solve(assumptions=[-literal])

        if can_be_true and can_be_false:
            return Entailment.UNDETERMINED
        if can_be_true:
            return Entailment.TRUE
        if can_be_false:
            return Entailment.FALSE
        raise InconsistentKnowledge(
            f"knowledge base is unsatisfiable ({len(self._clauses)} clauses)"
        )

    def iter_models(self, limit: Optional[int] = None) -> Iterator[frozenset]:
        """
        Yield satisfying assignments as frozensets of true atom ids.

        Enumeration adds blocking clauses, so it runs on a fresh solver
        bootstrapped from the recorded clauses.
        """
        bootstrap = [list(c.literals) for c in self._clauses]
        with Solver(name=self.solver_name, bootstrap_with=bootstrap) as solver:
            for count, model in enumerate(solver.enum_models()):
                if limit is not None and count >= limit:
                    return
                yield frozenset(lit for lit in model if lit > 0)

    # ── Lifecycle ────────────────────────────────────────────────────────────

    def _ensure_open(self):
        if self._solver is None:
            raise RuntimeError("knowledge base has been closed")

    def close(self):
        if self._solver is not None:
            self._solver.delete()
            self._solver = None
            logger.debug("released %s solver after %d clauses",
                         self.solver_name, len(self._clauses))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __repr__(self):
        state = "closed" if self._solver is None else self.solver_name
        return f"KnowledgeBase({len(self._clauses)} clauses, {state})"
