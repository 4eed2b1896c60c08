"""
Game configuration and the name <-> index <-> atom mapping.

Locations are the players in turn order followed by the case file, which
is treated as one extra pseudo-player. Cards are suspects, then weapons,
then rooms. Every (location, card) pair gets one propositional atom:

    atom = location_index * num_cards + card_index + 1

The +1 keeps 0 free, since DIMACS-style solvers use 0 as "no literal".
"""

from dataclasses import dataclass, field
import json

from .errors import ConfigurationError, InvalidIdentifier


CATEGORIES = ("suspects", "weapons", "rooms")


@dataclass(frozen=True)
class GameConfig:
    """Players in turn order, the three card categories, and solver choice."""
    players: tuple
    suspects: tuple
    weapons: tuple
    rooms: tuple
    case_file: str = "cf"
    solver: str = "glucose3"

    def __post_init__(self):
        for name in ("players",) + CATEGORIES:
            values = getattr(self, name)
            if not isinstance(values, (list, tuple)) or not all(
                isinstance(v, str) for v in values
            ):
                raise ConfigurationError(f"{name} must be a list of names, got {values!r}")
            object.__setattr__(self, name, tuple(values))
        for name in ("case_file", "solver"):
            if not isinstance(getattr(self, name), str):
                raise ConfigurationError(f"{name} must be a string")

        if not self.players:
            raise ConfigurationError("a game needs at least one player")
        if len(set(self.players)) != len(self.players):
            raise ConfigurationError(f"duplicate player names: {self.players}")
        if self.case_file in self.players:
            raise ConfigurationError(
                f"case file name {self.case_file!r} is also a player name"
            )

        seen = {}
        for category in CATEGORIES:
            cards = getattr(self, category)
            if not cards:
                raise ConfigurationError(f"category {category!r} is empty")
            for card in cards:
                if card in seen:
                    raise ConfigurationError(
                        f"card {card!r} appears in both {seen[card]} and {category}"
                        if seen[card] != category
                        else f"card {card!r} listed twice in {category}"
                    )
                seen[card] = category

    @property
    def cards(self) -> tuple:
        return self.suspects + self.weapons + self.rooms

    @classmethod
    def classic(cls, **overrides) -> "GameConfig":
        """The six-player game with the standard Clue deck."""
        values = dict(
            players=("sc", "mu", "wh", "gr", "pe", "pl"),
            suspects=("mu", "pl", "gr", "pe", "sc", "wh"),
            weapons=("kn", "ca", "re", "ro", "pi", "wr"),
            rooms=("ha", "lo", "di", "ki", "ba", "co", "bi", "li", "st"),
        )
        values.update(overrides)
        return cls(**values)

    def to_dict(self):
        return {
            "players": list(self.players),
            "suspects": list(self.suspects),
            "weapons": list(self.weapons),
            "rooms": list(self.rooms),
            "case_file": self.case_file,
            "solver": self.solver,
        }

    @classmethod
    def from_dict(cls, d):
        if not isinstance(d, dict):
            raise ConfigurationError(f"game config must be an object, got {d!r}")
        missing = [k for k in ("players",) + CATEGORIES if k not in d]
        if missing:
            raise ConfigurationError(f"game config missing {', '.join(missing)}")
        return cls(
            players=d["players"],
            suspects=d["suspects"],
            weapons=d["weapons"],
            rooms=d["rooms"],
            case_file=d.get("case_file", "cf"),
            solver=d.get("solver", "glucose3"),
        )

    def save(self, path="clue_config.json"):
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path="clue_config.json"):
        with open(path) as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"{path}: not valid JSON ({e})") from None
        return cls.from_dict(data)


@dataclass
class Registry:
    """
    Validated lookup tables over one GameConfig.

    Raw index arithmetic stays inside this class: callers hand in names and
    get atoms back, and an unknown name raises InvalidIdentifier before any
    atom is computed.
    """
    config: GameConfig
    _location_index: dict = field(init=False, repr=False)
    _card_index: dict = field(init=False, repr=False)
    _category: dict = field(init=False, repr=False)

    def __post_init__(self):
        self._location_index = {p: i for i, p in enumerate(self.locations)}
        self._card_index = {c: i for i, c in enumerate(self.config.cards)}
        self._category = {
            card: category
            for category in CATEGORIES
            for card in getattr(self.config, category)
        }

    # ── Sizes and orderings ──────────────────────────────────────────────────

    @property
    def players(self) -> tuple:
        return self.config.players

    @property
    def case_file(self) -> str:
        return self.config.case_file

    @property
    def locations(self) -> tuple:
        return self.config.players + (self.config.case_file,)

    @property
    def cards(self) -> tuple:
        return self.config.cards

    @property
    def num_players(self) -> int:
        return len(self.config.players)

    @property
    def num_locations(self) -> int:
        return self.num_players + 1

    @property
    def num_cards(self) -> int:
        return len(self.config.cards)

    @property
    def num_atoms(self) -> int:
        return self.num_locations * self.num_cards

    @property
    def categories(self) -> dict:
        """{category name: tuple of cards}, in suspects/weapons/rooms order."""
        return {c: getattr(self.config, c) for c in CATEGORIES}

    # ── Lookups ──────────────────────────────────────────────────────────────

    def location_index(self, name) -> int:
        try:
            return self._location_index[name]
        except (KeyError, TypeError):
            raise InvalidIdentifier("location", name) from None

    def card_index(self, name) -> int:
        try:
            return self._card_index[name]
        except (KeyError, TypeError):
            raise InvalidIdentifier("card", name) from None

    def is_player(self, name) -> bool:
        return name in self._location_index and name != self.case_file

    def category_of(self, card) -> str:
        self.card_index(card)
        return self._category[card]

    def atom(self, location, card) -> int:
        """Positive atom id for 'card is at location'."""
        return self.atom_at(self.location_index(location), self.card_index(card))

    def atom_at(self, location_index: int, card_index: int) -> int:
        if not 0 <= location_index < self.num_locations:
            raise InvalidIdentifier("location index", location_index)
        if not 0 <= card_index < self.num_cards:
            raise InvalidIdentifier("card index", card_index)
        return location_index * self.num_cards + card_index + 1

    def describe_atom(self, atom: int) -> tuple:
        """Inverse of atom(); only used for logging and debugging."""
        if not isinstance(atom, int) or not 1 <= atom <= self.num_atoms:
            raise InvalidIdentifier("atom", atom)
        location, card = divmod(atom - 1, self.num_cards)
        return self.locations[location], self.cards[card]

    def describe_literal(self, literal: int) -> str:
        location, card = self.describe_atom(abs(literal))
        sign = "" if literal > 0 else "~"
        return f"{sign}{card}@{location}"

    def next_player(self, index: int) -> int:
        """Clockwise neighbour in turn order."""
        return (index + 1) % self.num_players
