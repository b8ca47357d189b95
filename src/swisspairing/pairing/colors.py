"""Color preference rules and color allocation for a confirmed pair."""

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
from enum import IntEnum
from typing import Mapping, Optional, Tuple

from swisspairing.constants import STRONG_IMBALANCE
from swisspairing.models import PairingConfig, Player, opposite_color
from swisspairing.type_hints import BLACK, WHITE, Colour, PlayerId


class PreferenceStrength(IntEnum):
    """How much a player wants their preferred color."""

    NONE = 0
    MILD = 1
    STRONG = 2
    ABSOLUTE = 3  # Must be honored whenever a partner allows it


@dataclass(frozen=True)
class ColorPreference:
    color: Optional[Colour] = None
    strength: PreferenceStrength = PreferenceStrength.NONE

    def complements(self, other: "ColorPreference") -> bool:
        """True when one side wants white and the other black."""
        return (
            self.color is not None
            and other.color is not None
            and self.color != other.color
        )


NO_PREFERENCE = ColorPreference()

Preferences = Mapping[PlayerId, ColorPreference]


def calculate_color_preference(
    player: Player, config: PairingConfig
) -> ColorPreference:
    """Work out a player's color preference from their history alone.

    A run reaching ``config.max_color_streak`` gives an absolute preference
    for the other color. Otherwise a lifetime white/black difference of two
    or more is strong, any smaller difference mild, and a balanced history
    carries no preference.
    """
    if not player.color_history:
        return NO_PREFERENCE

    streak, last_color = player.color_streak
    if streak >= config.max_color_streak:
        return ColorPreference(opposite_color(last_color), PreferenceStrength.ABSOLUTE)

    imbalance = player.color_imbalance
    if imbalance == 0:
        return NO_PREFERENCE

    wanted = BLACK if imbalance > 0 else WHITE
    if abs(imbalance) >= STRONG_IMBALANCE:
        return ColorPreference(wanted, PreferenceStrength.STRONG)
    return ColorPreference(wanted, PreferenceStrength.MILD)


def assign_colors(
    first: Player, second: Player, preferences: Preferences
) -> Tuple[Player, Player]:
    """Decide who plays white.

    Parameters
    ----------
    first : Player
        The acting, higher-ranked player of the pair.
    second : Player
        The opponent chosen for ``first``.
    preferences : mapping
        Color preference per player id.

    Returns
    -------
    tuple of Player
        ``(white, black)``
    """
    first_pref = preferences.get(first.id, NO_PREFERENCE)
    second_pref = preferences.get(second.id, NO_PREFERENCE)

    # Opposite wishes: everybody is happy
    if first_pref.complements(second_pref):
        if first_pref.color == WHITE:
            return first, second
        return second, first

    # The stronger wish wins, ties go to the acting player
    if max(first_pref.strength, second_pref.strength) >= PreferenceStrength.STRONG:
        if first_pref.strength >= second_pref.strength:
            return _give(first, second, first_pref.color)
        return _give(second, first, second_pref.color)

    if second.rating > first.rating:
        return second, first
    return first, second


def _give(player: Player, opponent: Player, color: Colour) -> Tuple[Player, Player]:
    if color == WHITE:
        return player, opponent
    return opponent, player
