"""A player snapshot as handed over by the tournament controller."""

# Swiss Pairing
# Copyright (C) 2025  Swiss Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple

from swisspairing.exceptions import InvalidPlayerDataException
from swisspairing.type_hints import BLACK, WHITE, ColorHistory, Colour, PlayerId

_COLOR_ALIASES = {
    "white": WHITE,
    "w": WHITE,
    "black": BLACK,
    "b": BLACK,
}


def parse_color(value: Any) -> Colour:
    """Normalise a color string to WHITE or BLACK.

    Raises:
        InvalidPlayerDataException: If the value is not a recognised color
    """
    if isinstance(value, str):
        color = _COLOR_ALIASES.get(value.strip().lower())
        if color is not None:
            return color
    raise InvalidPlayerDataException(f"Unknown color: {value!r}")


def opposite_color(color: Colour) -> Colour:
    return BLACK if color == WHITE else WHITE


@dataclass(frozen=True)
class Player:
    """Represents a player as seen by the pairing engine.

    The tournament controller owns the writable copy of every player and
    hands a fresh snapshot to each pairing call. Nothing in this package
    modifies a Player.

    Attributes:
        id: Unique, stable identifier
        name: Display name
        rating: Numeric rating
        score: Cumulative tournament score
        color_history: Colors played, oldest first, one per completed round
        opponent_ids: Ids of opponents already faced
        has_bye: Whether a bye was already granted
        is_withdrawn: Whether the player has left the tournament
    """

    id: PlayerId
    name: str
    rating: float = 0
    score: float = 0.0
    color_history: ColorHistory = ()
    opponent_ids: FrozenSet[PlayerId] = field(default_factory=frozenset)
    has_bye: bool = False
    is_withdrawn: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.rating, bool) or not isinstance(self.rating, Real):
            raise InvalidPlayerDataException(
                f"Rating for {self.name} must be numeric, got {self.rating!r}"
            )
        if isinstance(self.score, bool) or not isinstance(self.score, Real):
            raise InvalidPlayerDataException(
                f"Score for {self.name} must be numeric, got {self.score!r}"
            )
        if self.score < 0:
            raise InvalidPlayerDataException(
                f"Score for {self.name} cannot be negative: {self.score}"
            )
        # frozen, so normalise through object.__setattr__
        object.__setattr__(
            self, "color_history", tuple(parse_color(c) for c in self.color_history)
        )
        object.__setattr__(self, "opponent_ids", frozenset(self.opponent_ids))

    @property
    def color_streak(self) -> Tuple[int, Optional[Colour]]:
        """Length and color of the run of identical colors ending the history."""
        if not self.color_history:
            return 0, None
        last_color = self.color_history[-1]
        streak = 0
        for color in reversed(self.color_history):
            if color != last_color:
                break
            streak += 1
        return streak, last_color

    @property
    def color_imbalance(self) -> int:
        """Whites minus blacks over the whole history."""
        whites = self.color_history.count(WHITE)
        return whites - (len(self.color_history) - whites)

    def has_met(self, other: "Player") -> bool:
        """Whether either player lists the other as a past opponent."""
        return other.id in self.opponent_ids or self.id in other.opponent_ids

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "rating": self.rating,
            "score": self.score,
            "color_history": list(self.color_history),
            "opponent_ids": sorted(self.opponent_ids, key=str),
            "has_bye": self.has_bye,
            "is_withdrawn": self.is_withdrawn,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary."""
        try:
            player_id = data["id"]
        except KeyError:
            raise InvalidPlayerDataException(f"Player data has no id: {data!r}")
        return cls(
            id=player_id,
            name=data.get("name", str(player_id)),
            rating=data.get("rating", 0),
            score=data.get("score", 0.0),
            color_history=tuple(data.get("color_history", ())),
            opponent_ids=frozenset(data.get("opponent_ids", ())),
            has_bye=data.get("has_bye", False),
            is_withdrawn=data.get("is_withdrawn", False),
        )


def ranking_key(player: Player) -> Tuple:
    """Sort key: rating descending, then id so equal ratings stay reproducible."""
    return (-player.rating, isinstance(player.id, str), player.id)


def players_by_id(players: Iterable[Player]) -> Dict[PlayerId, Player]:
    """Index a roster by player id."""
    return {player.id: player for player in players}
