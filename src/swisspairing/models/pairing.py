"""Data model for pairings and pairing rounds."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Tuple

from swisspairing.constants import BYE_OPPONENT_ID
from swisspairing.exceptions import InvalidRoundDataException
from swisspairing.type_hints import PlayerId


@dataclass(frozen=True)
class Pairing:
    """A single board of a round.

    Attributes
    ----------
    white_id : int or str
        Player with the white pieces, or the bye recipient.
    black_id : int or str
        Player with the black pieces, ``BYE_OPPONENT_ID`` on a bye.
    board_number : int
        1-based board number, contiguous within a round.
    is_bye : bool
        Whether this board is a bye.
    """

    white_id: PlayerId
    black_id: PlayerId
    board_number: int
    is_bye: bool = False

    @classmethod
    def bye(cls, player_id: PlayerId, board_number: int) -> "Pairing":
        return cls(
            white_id=player_id,
            black_id=BYE_OPPONENT_ID,
            board_number=board_number,
            is_bye=True,
        )

    @property
    def player_ids(self) -> Tuple[PlayerId, ...]:
        """Ids of the real participants on this board."""
        if self.is_bye:
            return (self.white_id,)
        return (self.white_id, self.black_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "white_id": self.white_id,
            "black_id": self.black_id,
            "board_number": self.board_number,
            "is_bye": self.is_bye,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pairing":
        try:
            return cls(
                white_id=data["white_id"],
                black_id=data.get("black_id", BYE_OPPONENT_ID),
                board_number=int(data["board_number"]),
                is_bye=bool(data.get("is_bye", False)),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidRoundDataException(f"Malformed pairing {data!r}: {exc}")


@dataclass(frozen=True)
class Round:
    """Container for one generated round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    pairings : tuple of Pairing
        Boards in board-number order as they were finalised.
    unpaired : tuple
        Ids of active players that could not be placed.
    errors : tuple of str
        Structural problems met while generating the round.
    """

    round_number: int
    pairings: Tuple[Pairing, ...] = field(default_factory=tuple)
    unpaired: Tuple[PlayerId, ...] = field(default_factory=tuple)
    errors: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pairings", tuple(self.pairings))
        object.__setattr__(self, "unpaired", tuple(self.unpaired))
        object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def games(self) -> Tuple[Pairing, ...]:
        return tuple(p for p in self.pairings if not p.is_bye)

    @property
    def byes(self) -> Tuple[Pairing, ...]:
        return tuple(p for p in self.pairings if p.is_bye)

    def iter_player_ids(self) -> Iterator[PlayerId]:
        """Every participant id in board order, repeats included."""
        for pairing in self.pairings:
            yield from pairing.player_ids

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round to dictionary."""
        return {
            "round_number": self.round_number,
            "pairings": [p.to_dict() for p in self.pairings],
            "unpaired": list(self.unpaired),
            "errors": list(self.errors),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Round":
        """Deserialize round from dictionary."""
        if "round_number" not in data:
            raise InvalidRoundDataException("Round data has no round_number")
        return cls(
            round_number=int(data["round_number"]),
            pairings=tuple(Pairing.from_dict(p) for p in data.get("pairings", [])),
            unpaired=tuple(data.get("unpaired", [])),
            errors=tuple(data.get("errors", [])),
        )
