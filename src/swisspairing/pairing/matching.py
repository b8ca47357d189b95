"""Partner selection inside a score group.

The generator only knows a strategy hands back partner tuples and leftovers,
so an exact matching algorithm can replace the greedy scan without touching
score groups, floating or byes.
"""

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

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Set, Tuple

from swisspairing.constants import (
    COMPLEMENTARY_COLOR_BONUS,
    DIFFERING_COLOR_BONUS,
    RATING_GAP_WEIGHT,
)
from swisspairing.models import PairingConfig, Player
from swisspairing.pairing.colors import (
    NO_PREFERENCE,
    PreferenceStrength,
    Preferences,
)
from swisspairing.type_hints import PlayerId
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)

PartnerList = List[Tuple[Player, Player]]


def is_admissible(
    player: Player,
    candidate: Player,
    config: PairingConfig,
    preferences: Optional[Preferences] = None,
) -> bool:
    """Check whether two players may be paired at all."""
    if player.id == candidate.id:
        return False

    if not config.allow_repeats and player.has_met(candidate):
        return False

    limit = config.rating_limit
    if limit is not None and abs(player.rating - candidate.rating) > limit:
        return False

    if config.strict_colors and preferences is not None:
        player_pref = preferences.get(player.id, NO_PREFERENCE)
        candidate_pref = preferences.get(candidate.id, NO_PREFERENCE)
        if (
            player_pref.strength == PreferenceStrength.ABSOLUTE
            and candidate_pref.strength == PreferenceStrength.ABSOLUTE
            and player_pref.color == candidate_pref.color
        ):
            return False

    return True


def score_pairing(player: Player, candidate: Player, preferences: Preferences) -> float:
    """Rank a possible pairing, higher is better.

    Never used to reject a pairing, see :func:`is_admissible` for that.
    """
    score = -abs(player.rating - candidate.rating) * RATING_GAP_WEIGHT

    player_pref = preferences.get(player.id, NO_PREFERENCE)
    candidate_pref = preferences.get(candidate.id, NO_PREFERENCE)
    if player_pref.complements(candidate_pref):
        score += COMPLEMENTARY_COLOR_BONUS * (
            player_pref.strength + candidate_pref.strength
        )
    elif player_pref.color != candidate_pref.color:
        score += DIFFERING_COLOR_BONUS

    return score


class MatchingStrategy(ABC):
    """Chooses partners among the players of one score group."""

    @abstractmethod
    def match(
        self,
        pool: Sequence[Player],
        preferences: Preferences,
        config: PairingConfig,
    ) -> Tuple[PartnerList, List[Player]]:
        """Pair up ``pool``.

        Args:
            pool: Players of the group, highest ranked first
            preferences: Color preference per player id
            config: Pairing configuration of the round

        Returns:
            Tuple of (partner list, leftovers). Each partner tuple has the
            higher-ranked player first. Leftovers keep pool order.
        """


class GreedyMatchingStrategy(MatchingStrategy):
    """Upper half against lower half, best admissible opponent first.

    Each upper-half player, in pool order, takes the still free lower-half
    player with the highest :func:`score_pairing`. Ties keep the earlier
    candidate. This is a local heuristic, not an optimal matching.
    """

    def match(
        self,
        pool: Sequence[Player],
        preferences: Preferences,
        config: PairingConfig,
    ) -> Tuple[PartnerList, List[Player]]:
        midpoint = (len(pool) + 1) // 2
        upper_half = pool[:midpoint]
        lower_half = pool[midpoint:]

        partners: PartnerList = []
        taken: Set[PlayerId] = set()

        for player in upper_half:
            best_opponent = None
            best_score = float("-inf")
            for candidate in lower_half:
                if candidate.id in taken:
                    continue
                if not is_admissible(player, candidate, config, preferences):
                    continue
                score = score_pairing(player, candidate, preferences)
                if score > best_score:
                    best_score = score
                    best_opponent = candidate

            if best_opponent is None:
                logger.debug("No admissible opponent for %s", player.name)
                continue

            partners.append((player, best_opponent))
            taken.add(player.id)
            taken.add(best_opponent.id)

        leftovers = [p for p in pool if p.id not in taken]
        return partners, leftovers
