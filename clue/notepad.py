"""
Reporting utilities: the detective's notepad and the clause listing.
"""

from .core.query import Notepad
from .core.registry import Registry


def format_notepad(notepad: Notepad) -> str:
    """
    Tab-separated grid: one row per card, one column per location.

        	sc	mu	wh	gr	pe	pl	cf
        mu	n	n	n	Y	n	n	n
    """
    lines = ["\t" + "\t".join(notepad.columns)]
    for card in notepad.rows:
        lines.append(card + "\t" + "\t".join(b.symbol for b in notepad.row(card)))
    return "\n".join(lines)


def print_notepad(notepad: Notepad, title: str = "Notepad"):
    print(f"\n{'='*60}")
    print(title)
    print(f"{'='*60}")
    print(format_notepad(notepad))
    solution = notepad.solution()
    if notepad.is_solved:
        print(f"\n  Case file: {' '.join(solution)}")
    elif solution:
        print(f"\n  Case file so far: {' '.join(solution)}")
    print(f"{'='*60}")


def print_knowledge(clauses, registry: Registry):
    """Print every clause in the knowledge base, labelled."""
    print(f"\n{'='*60}")
    print(f"Knowledge base ({len(clauses)} clauses):")
    print(f"{'='*60}")
    for i, clause in enumerate(clauses, 1):
        print(f"  {i}. {clause.describe(registry)}")
