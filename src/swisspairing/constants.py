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

# --- Constants ---

# Opponent id recorded on a bye pairing
BYE_OPPONENT_ID = -1

# Pairing systems
SYSTEM_SWISS = "swiss"
SYSTEM_ROUND_ROBIN = "round_robin"
SUPPORTED_SYSTEMS = (SYSTEM_SWISS, SYSTEM_ROUND_ROBIN)

# Configuration defaults
DEFAULT_MAX_COLOR_STREAK = 2
DEFAULT_ACCELERATED_ROUNDS = 2

# Pairing score weights
RATING_GAP_WEIGHT = 0.1
COMPLEMENTARY_COLOR_BONUS = 100.0
DIFFERING_COLOR_BONUS = 50.0

# Lifetime white/black difference from which a preference counts as strong
STRONG_IMBALANCE = 2

# Largest score gap between opponents before the score group check warns
MAX_SCORE_GROUP_GAP = 1.0

# Environment variable naming a directory for the rotating log file
LOG_DIR_ENV_VAR = "SWISSPAIRING_LOG_DIR"
