"""
Game: the classic six-player sample game.

We play Miss Scarlet (sc) holding Mrs White, the library and the study.
Twenty-seven suggestions later the case file is Mrs Peacock with the
lead pipe in the billiard room, and sc accuses correctly.
"""

from ..core.registry import GameConfig
from .transcript import Transcript


SUGGESTIONS = [
    # suggester, card1, card2, card3, refuter, shown
    ("sc", "sc", "ro", "lo", "mu", "sc"),
    ("mu", "pe", "pi", "di", "pe", None),
    ("wh", "mu", "re", "ba", "pe", None),
    ("gr", "wh", "kn", "ba", "pl", None),
    ("pe", "gr", "ca", "di", "wh", None),
    ("pl", "wh", "wr", "st", "sc", "wh"),
    ("sc", "pl", "ro", "co", "mu", "pl"),
    ("mu", "pe", "ro", "ba", "wh", None),
    ("wh", "mu", "ca", "st", "gr", None),
    ("gr", "pe", "kn", "di", "pe", None),
    ("pe", "mu", "pi", "di", "pl", None),
    ("pl", "gr", "kn", "co", "wh", None),
    ("sc", "pe", "kn", "lo", "mu", "lo"),
    ("mu", "pe", "kn", "di", "wh", None),
    ("wh", "pe", "wr", "ha", "gr", None),
    ("gr", "wh", "pi", "co", "pl", None),
    ("pe", "sc", "pi", "ha", "mu", None),
    ("pl", "pe", "pi", "ba", None, None),
    ("sc", "wh", "pi", "ha", "pe", "ha"),
    ("wh", "pe", "pi", "ha", "pe", None),
    ("pe", "pe", "pi", "ha", None, None),
    ("sc", "gr", "pi", "st", "wh", "gr"),
    ("mu", "pe", "pi", "ba", "pl", None),
    ("wh", "pe", "pi", "st", "sc", "st"),
    ("gr", "wh", "pi", "st", "sc", "wh"),
    ("pe", "wh", "pi", "st", "sc", "wh"),
    ("pl", "pe", "pi", "ki", "gr", None),
]

SOLUTION = ("pe", "pi", "bi")
HAND = ("wh", "li", "st")


def make_classic_transcript() -> Transcript:
    transcript = Transcript(
        GameConfig.classic(),
        description="Six players; sc holds wh li st and solves pe pi bi",
    )
    transcript.hand("sc", HAND)
    for suggester, c1, c2, c3, refuter, shown in SUGGESTIONS:
        transcript.suggest(suggester, c1, c2, c3, refuter, shown)
    transcript.accuse("sc", *SOLUTION, correct=True)
    return transcript
