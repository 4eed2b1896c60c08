from .axioms import (
    existence_axioms, exclusivity_axioms,
    solution_existence_axioms, solution_uniqueness_axioms,
    structural_axioms, AXIOM_FAMILIES,
)
from .events import encode_deal, encode_suggestion, encode_accusation

__all__ = [
    "existence_axioms", "exclusivity_axioms",
    "solution_existence_axioms", "solution_uniqueness_axioms",
    "structural_axioms", "AXIOM_FAMILIES",
    "encode_deal", "encode_suggestion", "encode_accusation",
]
