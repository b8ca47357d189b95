"""Data models shared by the pairing generator and the round validator."""

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

from swisspairing.models.config import PairingConfig
from swisspairing.models.pairing import Pairing, Round
from swisspairing.models.player import (
    Player,
    opposite_color,
    parse_color,
    players_by_id,
    ranking_key,
)

__all__ = [
    "PairingConfig",
    "Pairing",
    "Round",
    "Player",
    "opposite_color",
    "parse_color",
    "players_by_id",
    "ranking_key",
]
