"""Swiss-system pairing generation."""

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

from swisspairing.pairing.colors import (
    ColorPreference,
    PreferenceStrength,
    assign_colors,
    calculate_color_preference,
)
from swisspairing.pairing.matching import (
    GreedyMatchingStrategy,
    MatchingStrategy,
    is_admissible,
    score_pairing,
)
from swisspairing.pairing.swiss import generate_swiss_pairings, group_by_score

__all__ = [
    "ColorPreference",
    "PreferenceStrength",
    "assign_colors",
    "calculate_color_preference",
    "GreedyMatchingStrategy",
    "MatchingStrategy",
    "is_admissible",
    "score_pairing",
    "generate_swiss_pairings",
    "group_by_score",
]
