"""PairingConfig data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from swisspairing.constants import (
    DEFAULT_ACCELERATED_ROUNDS,
    DEFAULT_MAX_COLOR_STREAK,
    SUPPORTED_SYSTEMS,
    SYSTEM_SWISS,
)
from swisspairing.exceptions import InvalidConfigurationException


@dataclass(frozen=True)
class PairingConfig:
    """Pairing configuration settings, supplied once per round.

    Attributes
    ----------
    system : str
        Pairing system selector, ``"swiss"`` or ``"round_robin"``.
    allow_repeats : bool
        Whether two players may meet a second time.
    max_color_streak : int
        Longest permitted run of one color.
    score_groups : bool
        Whether score group boundaries are enforced when validating.
    rating_difference_limit : float or None
        Largest rating gap allowed on a board. None or 0 disables the limit.
    accelerated_pairings : bool
        Pool the whole field by rating in the opening rounds.
    accelerated_rounds : int
        How many opening rounds acceleration covers.
    strict_colors : bool
        Refuse to pair two players who both must have the same color,
        instead of letting one of them break their color run.
    """

    system: str = SYSTEM_SWISS
    allow_repeats: bool = False
    max_color_streak: int = DEFAULT_MAX_COLOR_STREAK
    score_groups: bool = True
    rating_difference_limit: Optional[float] = None
    accelerated_pairings: bool = False
    accelerated_rounds: int = DEFAULT_ACCELERATED_ROUNDS
    strict_colors: bool = False

    def __post_init__(self) -> None:
        if self.system not in SUPPORTED_SYSTEMS:
            raise InvalidConfigurationException(
                f"Unknown pairing system {self.system!r}, "
                f"expected one of {', '.join(SUPPORTED_SYSTEMS)}"
            )
        if isinstance(self.max_color_streak, bool) or not isinstance(
            self.max_color_streak, int
        ):
            raise InvalidConfigurationException("max_color_streak must be an integer")
        if self.max_color_streak < 1:
            raise InvalidConfigurationException(
                f"max_color_streak must be at least 1, got {self.max_color_streak}"
            )
        if self.rating_difference_limit is not None and self.rating_difference_limit < 0:
            raise InvalidConfigurationException(
                "rating_difference_limit cannot be negative"
            )
        if self.accelerated_rounds < 0:
            raise InvalidConfigurationException("accelerated_rounds cannot be negative")

    @property
    def rating_limit(self) -> Optional[float]:
        """The active rating gap limit, None when unlimited."""
        return self.rating_difference_limit or None

    def is_accelerated(self, round_number: int) -> bool:
        """Whether accelerated grouping applies to ``round_number``."""
        return self.accelerated_pairings and round_number <= self.accelerated_rounds

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "system": self.system,
            "allow_repeats": self.allow_repeats,
            "max_color_streak": self.max_color_streak,
            "score_groups": self.score_groups,
            "rating_difference_limit": self.rating_difference_limit,
            "accelerated_pairings": self.accelerated_pairings,
            "accelerated_rounds": self.accelerated_rounds,
            "strict_colors": self.strict_colors,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairingConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            system=data.get("system", SYSTEM_SWISS),
            allow_repeats=data.get("allow_repeats", False),
            max_color_streak=data.get("max_color_streak", DEFAULT_MAX_COLOR_STREAK),
            score_groups=data.get("score_groups", True),
            rating_difference_limit=data.get("rating_difference_limit"),
            accelerated_pairings=data.get("accelerated_pairings", False),
            accelerated_rounds=data.get(
                "accelerated_rounds", DEFAULT_ACCELERATED_ROUNDS
            ),
            strict_colors=data.get("strict_colors", False),
        )
