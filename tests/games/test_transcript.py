"""
Tests for game transcripts and the game registry.

Core claims:
    - Malformed events are rejected when the transcript is built,
      before any of them reaches a reasoner
    - replay() applies events in order and can skip accusations
    - Every registered game replays to a consistent, solved notepad
"""

import json

import pytest

from clue.core.errors import ConfigurationError
from clue.core.registry import GameConfig
from clue.games import GAMES, Transcript, check_event, describe_event, replay
from clue.games.small import SOLUTION, make_small_transcript, small_config
from clue.reasoner import ClueReasoner


class TestCheckEvent:
    def test_unknown_type(self):
        with pytest.raises(ConfigurationError, match="unknown event type"):
            check_event({"type": "teleport", "cards": []})

    def test_missing_key(self):
        with pytest.raises(ConfigurationError, match="correct"):
            check_event({"type": "accuse", "accuser": "a", "cards": ["s1", "w1", "r1"]})

    def test_wrong_card_count(self):
        with pytest.raises(ConfigurationError, match="3 cards"):
            check_event({"type": "suggest", "suggester": "a", "cards": ["s1", "w1"]})

    def test_correct_must_be_bool(self):
        with pytest.raises(ConfigurationError):
            check_event({"type": "accuse", "accuser": "a",
                         "cards": ["s1", "w1", "r1"], "correct": "yes"})

    def test_not_a_dict(self):
        with pytest.raises(ConfigurationError):
            check_event(["hand", "a"])

    def test_bad_event_rejects_whole_transcript(self):
        events = [
            {"type": "hand", "player": "a", "cards": ["s2"]},
            {"type": "shout"},
        ]
        with pytest.raises(ConfigurationError, match="event 1"):
            Transcript(small_config(), events)

    def test_cards_must_be_names(self):
        with pytest.raises(ConfigurationError, match="card must be a name"):
            check_event({"type": "hand", "player": "a", "cards": [1, 2]})

    @pytest.mark.parametrize("key", ["suggester", "refuter", "shown"])
    def test_suggestion_names_must_be_strings(self, key):
        event = {"type": "suggest", "suggester": "a", "cards": ["s1", "w1", "r1"],
                 "refuter": "b", "shown": "w1"}
        event[key] = ["b"]
        with pytest.raises(ConfigurationError, match=key):
            check_event(event)

    def test_absent_refuter_may_be_null(self):
        check_event({"type": "suggest", "suggester": "a",
                     "cards": ["s1", "w1", "r1"], "refuter": None, "shown": None})


class TestSerialisation:
    def test_default_config_is_classic(self):
        transcript = Transcript.from_dict({"events": []})
        assert transcript.config == GameConfig.classic()

    def test_from_dict_requires_events(self):
        with pytest.raises(ConfigurationError):
            Transcript.from_dict({"config": small_config().to_dict()})

    def test_null_config(self):
        with pytest.raises(ConfigurationError, match="game config"):
            Transcript.from_dict({"config": None, "events": []})

    def test_events_must_be_a_list(self):
        with pytest.raises(ConfigurationError, match="events"):
            Transcript.from_dict({"events": "hand a s2"})

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "game.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="not valid JSON"):
            Transcript.load(str(path))

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "game.json"
        original = make_small_transcript()
        original.save(str(path))
        loaded = Transcript.load(str(path))
        assert loaded.config == original.config
        assert loaded.events == original.events
        assert json.loads(path.read_text())["description"] == original.description


class TestReplay:
    def test_applies_every_event(self):
        transcript = make_small_transcript()
        with ClueReasoner(transcript.config) as reasoner:
            applied = replay(reasoner, transcript)
            assert applied == len(transcript.events)
            assert reasoner.events == applied

    def test_skip_accusations(self):
        transcript = make_small_transcript()
        with ClueReasoner(transcript.config) as reasoner:
            applied = replay(reasoner, transcript, accusations=False)
            assert applied == len(transcript.events) - 2

    def test_stop_fn(self):
        transcript = make_small_transcript()
        with ClueReasoner(transcript.config) as reasoner:
            applied = replay(reasoner, transcript,
                             stop_fn=lambda r: r.events >= 2)
            assert applied == 2

    def test_small_game_solution(self):
        transcript = make_small_transcript()
        with ClueReasoner(transcript.config) as reasoner:
            replay(reasoner, transcript)
            assert reasoner.solution() == SOLUTION

    def test_verbose_prints_events(self, capsys):
        transcript = make_small_transcript()
        with ClueReasoner(transcript.config) as reasoner:
            replay(reasoner, transcript, verbose=True)
        out = capsys.readouterr().out
        assert "a holds s2" in out
        assert "b shows w1" in out


class TestDescribeEvent:
    def test_suggestion_variants(self):
        base = {"type": "suggest", "suggester": "a", "cards": ["s1", "w1", "r1"]}
        assert describe_event(base).endswith("nobody refutes")
        assert describe_event({**base, "refuter": "b"}).endswith("b refutes")
        assert describe_event({**base, "refuter": "b", "shown": "w1"}).endswith("b shows w1")

    def test_accusation(self):
        event = {"type": "accuse", "accuser": "a",
                 "cards": ["s1", "w2", "r1"], "correct": False}
        assert describe_event(event) == "a accuses s1 w2 r1 (wrong)"


class TestRegistry:
    @pytest.mark.parametrize("name", sorted(GAMES))
    def test_every_game_solves(self, name):
        transcript = GAMES[name]["make_transcript"]()
        with ClueReasoner(transcript.config) as reasoner:
            replay(reasoner, transcript)
            assert reasoner.is_consistent()
            assert reasoner.solution() is not None

    def test_descriptions(self):
        assert all(game["description"] for game in GAMES.values())
