"""
Game registry.

Each game is a dict describing a replayable transcript:
    make_transcript:  () -> Transcript
    description:      str
"""

from .transcript import Transcript, replay, apply_event, check_event, describe_event
from .classic import make_classic_transcript
from .small import make_small_transcript


GAMES = {
    "classic": {
        "make_transcript": make_classic_transcript,
        "description":     "Six-player sample game from Miss Scarlet's seat",
    },
    "small": {
        "make_transcript": make_small_transcript,
        "description":     "Three players, two cards per category",
    },
}

__all__ = [
    "GAMES", "Transcript", "replay", "apply_event", "check_event", "describe_event",
    "make_classic_transcript", "make_small_transcript",
]
