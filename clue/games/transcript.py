"""
Game transcripts: a GameConfig plus the ordered events observed in play.

Events are plain dicts so a transcript round-trips through JSON:

    {"type": "hand",    "player": "sc", "cards": ["wh", "li", "st"]}
    {"type": "suggest", "suggester": "sc", "cards": ["sc", "ro", "lo"],
                        "refuter": "mu", "shown": "sc"}
    {"type": "accuse",  "accuser": "sc", "cards": ["pe", "pi", "bi"],
                        "correct": true}

refuter and shown are optional on suggestions.
"""

from dataclasses import dataclass, field
from typing import Optional
import json

from ..core.errors import ConfigurationError
from ..core.registry import GameConfig


REQUIRED_KEYS = {
    "hand":    ("player", "cards"),
    "suggest": ("suggester", "cards"),
    "accuse":  ("accuser", "cards", "correct"),
}

NAME_KEYS = ("player", "suggester", "accuser", "refuter", "shown")


def check_event(event, position: int = 0):
    """Shape and type check only; names are resolved by the encoders."""
    if not isinstance(event, dict):
        raise ConfigurationError(f"event {position}: expected an object, got {event!r}")
    kind = event.get("type")
    if kind not in REQUIRED_KEYS:
        raise ConfigurationError(f"event {position}: unknown event type {kind!r}")
    missing = [k for k in REQUIRED_KEYS[kind] if k not in event]
    if missing:
        raise ConfigurationError(
            f"event {position} ({kind}): missing {', '.join(missing)}"
        )
    if not isinstance(event["cards"], (list, tuple)):
        raise ConfigurationError(f"event {position} ({kind}): cards must be a list")
    if kind != "hand" and len(event["cards"]) != 3:
        raise ConfigurationError(
            f"event {position} ({kind}): expected 3 cards, got {len(event['cards'])}"
        )
    if kind == "accuse" and not isinstance(event["correct"], bool):
        raise ConfigurationError(f"event {position} (accuse): correct must be true/false")
    for key in NAME_KEYS:
        name = event.get(key)
        if name is not None and not isinstance(name, str):
            raise ConfigurationError(
                f"event {position} ({kind}): {key} must be a name, got {name!r}"
            )
    for card in event["cards"]:
        if not isinstance(card, str):
            raise ConfigurationError(
                f"event {position} ({kind}): card must be a name, got {card!r}"
            )


@dataclass
class Transcript:
    config: GameConfig = field(default_factory=GameConfig.classic)
    events: list = field(default_factory=list)
    description: str = ""

    def __post_init__(self):
        for i, event in enumerate(self.events):
            check_event(event, i)

    # ── Builders ─────────────────────────────────────────────────────────────

    def hand(self, player, cards):
        return self._append({"type": "hand", "player": player, "cards": list(cards)})

    def suggest(self, suggester, card1, card2, card3, refuter=None, shown=None):
        return self._append({
            "type": "suggest", "suggester": suggester,
            "cards": [card1, card2, card3],
            "refuter": refuter, "shown": shown,
        })

    def accuse(self, accuser, card1, card2, card3, correct: bool):
        return self._append({
            "type": "accuse", "accuser": accuser,
            "cards": [card1, card2, card3], "correct": correct,
        })

    def _append(self, event):
        check_event(event, len(self.events))
        self.events.append(event)
        return self

    # ── Serialisation ────────────────────────────────────────────────────────

    def to_dict(self):
        return {
            "description": self.description,
            "config": self.config.to_dict(),
            "events": list(self.events),
        }

    @classmethod
    def from_dict(cls, d):
        if not isinstance(d, dict) or "events" not in d:
            raise ConfigurationError("transcript must be an object with an 'events' list")
        if not isinstance(d["events"], list):
            raise ConfigurationError("transcript 'events' must be a list")
        config = GameConfig.from_dict(d["config"]) if "config" in d else GameConfig.classic()
        return cls(config, list(d["events"]), d.get("description", ""))

    def save(self, path="clue_transcript.json"):
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path="clue_transcript.json"):
        with open(path) as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"{path}: not valid JSON ({e})") from None
        return cls.from_dict(data)


def apply_event(reasoner, event: dict):
    kind = event["type"]
    if kind == "hand":
        reasoner.hand(event["player"], event["cards"])
    elif kind == "suggest":
        reasoner.suggest(
            event["suggester"], *event["cards"],
            refuter=event.get("refuter"), shown=event.get("shown"),
        )
    else:
        reasoner.accuse(event["accuser"], *event["cards"], correct=event["correct"])


def replay(reasoner, transcript: Transcript, accusations: bool = True,
           stop_fn=None, verbose: bool = False):
    """
    Feed every event of transcript into reasoner, in order.

    Args:
        accusations: if False, accuse events are skipped
        stop_fn:     stop_fn(reasoner) -> bool; checked before each event
        verbose:     print each event as it is applied

    Returns the number of events applied.
    """
    applied = 0
    for event in transcript.events:
        if stop_fn and stop_fn(reasoner):
            break
        if event["type"] == "accuse" and not accusations:
            continue
        if verbose:
            print(f"  [{event['type']}] {describe_event(event)}")
        apply_event(reasoner, event)
        applied += 1
    return applied


def describe_event(event: dict) -> str:
    cards = " ".join(event["cards"])
    kind = event["type"]
    if kind == "hand":
        return f"{event['player']} holds {cards}"
    if kind == "accuse":
        verdict = "correct" if event["correct"] else "wrong"
        return f"{event['accuser']} accuses {cards} ({verdict})"
    text = f"{event['suggester']} suggests {cards}"
    refuter: Optional[str] = event.get("refuter")
    if refuter is None:
        return text + ", nobody refutes"
    shown = event.get("shown")
    return text + (f", {refuter} shows {shown}" if shown else f", {refuter} refutes")
