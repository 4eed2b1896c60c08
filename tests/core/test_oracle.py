"""
Unit tests for the pysat-backed knowledge base.

Core claims:
    - Empty clauses and zero / non-integer literals raise MalformedClause
    - A batch with one bad clause adds nothing
    - test_literal answers TRUE / FALSE / UNDETERMINED without adding clauses
    - An unsatisfiable knowledge base raises InconsistentKnowledge
    - Model enumeration never touches the live solver
"""

import pytest

from clue.core.clause import Clause, unit
from clue.core.errors import (
    ConfigurationError, InconsistentKnowledge, MalformedClause,
)
from clue.core.oracle import Entailment, KnowledgeBase, solver_names


@pytest.fixture
def kb():
    with KnowledgeBase() as kb:
        yield kb


# ── add_clause ────────────────────────────────────────────────────────────────

class TestAddClause:
    def test_empty_clause(self, kb):
        with pytest.raises(MalformedClause):
            kb.add_clause([])

    def test_zero_literal(self, kb):
        with pytest.raises(MalformedClause):
            kb.add_clause([1, 0, 2])

    def test_float_literal(self, kb):
        with pytest.raises(MalformedClause):
            kb.add_clause([1.0])

    def test_bool_literal(self, kb):
        with pytest.raises(MalformedClause):
            kb.add_clause([True])

    def test_bare_int(self, kb):
        with pytest.raises(MalformedClause):
            kb.add_clause(3)

    def test_malformed_clause_is_an_assertion_error(self, kb):
        with pytest.raises(AssertionError):
            kb.add_clause([])

    def test_records_clauses_in_order(self, kb):
        kb.add_clause([1, 2])
        kb.add_clause(unit(-1, "label"))
        assert [c.literals for c in kb.clauses] == [(1, 2), (-1,)]
        assert kb.clauses[1].label == "label"
        assert len(kb) == 2

    def test_bad_batch_adds_nothing(self, kb):
        with pytest.raises(MalformedClause):
            kb.add_clauses([[1], [2, 3], [0]])
        assert len(kb) == 0
        assert kb.is_consistent()


# ── test_literal ──────────────────────────────────────────────────────────────

class TestTestLiteral:
    def test_undetermined(self, kb):
        kb.add_clause([1, 2])
        assert kb.test_literal(1) is Entailment.UNDETERMINED

    def test_entailed(self, kb):
        kb.add_clause([1])
        assert kb.test_literal(1) is Entailment.TRUE
        assert kb.test_literal(-1) is Entailment.FALSE

    def test_entailed_by_resolution(self, kb):
        kb.add_clauses([[1, 2], [-1, 3], [-2, 3]])
        assert kb.test_literal(3) is Entailment.TRUE

    def test_negation_entailed(self, kb):
        kb.add_clauses([[1, 2], [-2]])
        kb.add_clause([-1, -3])
        assert kb.test_literal(3) is Entailment.FALSE

    def test_query_adds_nothing(self, kb):
        kb.add_clause([1, 2])
        kb.test_literal(1)
        kb.test_literal(-2)
        assert len(kb) == 1
        assert kb.test_literal(2) is Entailment.UNDETERMINED

    def test_zero_is_not_a_literal(self, kb):
        with pytest.raises(MalformedClause):
            kb.test_literal(0)

    def test_contradiction_is_reported(self, kb):
        kb.add_clauses([[1], [-1]])
        assert not kb.is_consistent()
        with pytest.raises(InconsistentKnowledge):
            kb.test_literal(1)


# ── iter_models ───────────────────────────────────────────────────────────────

class TestIterModels:
    def test_exactly_one_of_two(self, kb):
        kb.add_clauses([[1, 2], [-1, -2]])
        models = set(kb.iter_models())
        assert models == {frozenset({1}), frozenset({2})}

    def test_limit(self, kb):
        kb.add_clause([1, 2, 3])
        assert len(list(kb.iter_models(limit=2))) == 2

    def test_enumeration_leaves_live_solver_alone(self, kb):
        kb.add_clause([1, 2])
        list(kb.iter_models())
        assert kb.test_literal(1) is Entailment.UNDETERMINED
        assert len(kb) == 1

    def test_unsatisfiable_has_no_models(self, kb):
        kb.add_clauses([[1], [-1]])
        assert list(kb.iter_models()) == []


# ── Lifecycle ─────────────────────────────────────────────────────────────────

class TestLifecycle:
    def test_unknown_solver(self):
        with pytest.raises(ConfigurationError):
            KnowledgeBase("no-such-solver")

    def test_glucose_is_known(self):
        assert "glucose3" in solver_names()

    def test_closed_knowledge_base_refuses_work(self):
        kb = KnowledgeBase()
        kb.close()
        with pytest.raises(RuntimeError):
            kb.add_clause([1])
        kb.close()  # idempotent

    def test_clause_objects_accepted(self, kb):
        kb.add_clause(Clause((4, -5), "axiom"))
        assert kb.clauses[0] == Clause((4, -5), "axiom")
