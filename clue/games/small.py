"""
Game: three players and a two-card-per-category deck.

Small enough that every model of the knowledge base can be enumerated,
which makes it the usual fixture for property tests.

Hidden truth: case file s1 w2 r1; a holds s2, b holds w1, c holds r2.
"""

from ..core.registry import GameConfig
from .transcript import Transcript


def small_config(**overrides) -> GameConfig:
    values = dict(
        players=("a", "b", "c"),
        suspects=("s1", "s2"),
        weapons=("w1", "w2"),
        rooms=("r1", "r2"),
    )
    values.update(overrides)
    return GameConfig(**values)


SOLUTION = ("s1", "w2", "r1")


def make_small_transcript() -> Transcript:
    transcript = Transcript(small_config(), description="Three players, tiny deck")
    transcript.hand("a", ["s2"])
    transcript.suggest("a", "s1", "w1", "r1", refuter="b", shown="w1")
    transcript.suggest("b", "s2", "w2", "r2", refuter="c")
    transcript.suggest("c", "s1", "w2", "r2")
    transcript.accuse("b", "s1", "w2", "r2", correct=False)
    transcript.accuse("a", *SOLUTION, correct=True)
    return transcript
