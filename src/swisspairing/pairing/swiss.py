"""Swiss System Pairing Implementation.

Players are split into score groups, highest score first. Every group is
paired upper half against lower half by a :class:`MatchingStrategy`, and
whoever is left over floats down into the next group. Leftovers of the
lowest group stay unpaired, apart from the odd player out who receives the
bye.
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

from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from swisspairing.constants import SYSTEM_SWISS
from swisspairing.models import Pairing, PairingConfig, Player, Round, ranking_key
from swisspairing.pairing.colors import (
    Preferences,
    assign_colors,
    calculate_color_preference,
)
from swisspairing.pairing.matching import GreedyMatchingStrategy, MatchingStrategy
from swisspairing.type_hints import PlayerId
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)

NO_ACTIVE_PLAYERS = "No active players to pair"

MatchOutcome = Tuple[List[Tuple[Player, Player]], List[Player], Optional[Player]]


def group_by_score(players: Iterable[Player]) -> List[List[Player]]:
    """Split players into score groups, highest score first.

    Each group is ordered by :func:`ranking_key`.
    """
    groups: Dict[float, List[Player]] = {}
    for player in players:
        groups.setdefault(player.score, []).append(player)
    return [
        sorted(groups[score], key=ranking_key)
        for score in sorted(groups, reverse=True)
    ]


def build_worklists(
    players: Sequence[Player], round_number: int, config: PairingConfig
) -> List[List[Player]]:
    """One pending list per score tier.

    Accelerated rounds ignore scores and pool the whole field, so the half
    split sets the top half by rating against the bottom half.
    """
    if config.is_accelerated(round_number):
        return [sorted(players, key=ranking_key)]
    return group_by_score(players)


def _match_lowest_tier(
    pool: List[Player],
    preferences: Preferences,
    config: PairingConfig,
    strategy: MatchingStrategy,
) -> MatchOutcome:
    """Pair the lowest tier and pick its bye.

    The pool is matched as a whole first and the bye goes to the lowest
    ranked leftover without a previous bye. When every leftover already had
    one, the match is retried with another bye candidate set aside, lowest
    ranked first, and the first retry leaving fewer players unpaired wins.
    """
    partners, leftovers = strategy.match(pool, preferences, config)
    if len(pool) % 2 == 0:
        return partners, leftovers, None

    eligible = [p for p in reversed(leftovers) if not p.has_bye]
    if eligible:
        bye_player = eligible[0]
        return partners, [p for p in leftovers if p is not bye_player], bye_player

    for candidate in reversed(pool):
        if candidate.has_bye:
            continue
        rest = [p for p in pool if p is not candidate]
        retry_partners, retry_leftovers = strategy.match(rest, preferences, config)
        if len(retry_leftovers) < len(leftovers):
            return retry_partners, retry_leftovers, candidate

    return partners, leftovers, None


def generate_swiss_pairings(
    players: Iterable[Player],
    round_number: int,
    config: Optional[PairingConfig] = None,
    strategy: Optional[MatchingStrategy] = None,
) -> Round:
    """Create the pairings for a Swiss-system round.

    Parameters
    ----------
    players : iterable of Player
        The full roster. Withdrawn players are ignored entirely.
    round_number : int
        Number of the round being generated.
    config : PairingConfig, optional
        Pairing configuration, defaults to ``PairingConfig()``.
    strategy : MatchingStrategy, optional
        Partner selection inside a score group, greedy by default.

    Returns
    -------
    Round
        Never raises for domain problems. Players who could not be placed are
        listed in ``unpaired`` with one error message each.
    """
    config = config or PairingConfig()
    strategy = strategy or GreedyMatchingStrategy()

    active_players = [p for p in players if not p.is_withdrawn]
    logger.info(
        "Generating round %d for %d active players", round_number, len(active_players)
    )

    if not active_players:
        logger.warning("Round %d: %s", round_number, NO_ACTIVE_PLAYERS)
        return Round(round_number=round_number, errors=(NO_ACTIVE_PLAYERS,))

    if config.system != SYSTEM_SWISS:
        message = (
            f"Pairing system {config.system!r} is not handled by the Swiss generator"
        )
        logger.warning(message)
        return Round(
            round_number=round_number,
            unpaired=tuple(p.id for p in sorted(active_players, key=ranking_key)),
            errors=(message,),
        )

    preferences = {p.id: calculate_color_preference(p, config) for p in active_players}
    worklists = build_worklists(active_players, round_number, config)

    pairings: List[Pairing] = []
    placed: Set[PlayerId] = set()
    last_tier = len(worklists) - 1

    for tier in range(len(worklists)):
        pool = sorted(worklists[tier], key=ranking_key)
        worklists[tier] = []
        if not pool:
            continue

        if tier == last_tier:
            partners, leftovers, bye_player = _match_lowest_tier(
                pool, preferences, config, strategy
            )
        else:
            partners, leftovers = strategy.match(pool, preferences, config)
            bye_player = None

        for first, second in partners:
            white, black = assign_colors(first, second, preferences)
            pairings.append(Pairing(white.id, black.id, len(pairings) + 1))
            placed.update((white.id, black.id))

        if bye_player is not None:
            logger.info("Round %d: bye for %s", round_number, bye_player.name)
            pairings.append(Pairing.bye(bye_player.id, len(pairings) + 1))
            placed.add(bye_player.id)

        if tier < last_tier:
            for floater in leftovers:
                logger.debug(
                    "Round %d: floating %s into score tier %d",
                    round_number,
                    floater.name,
                    tier + 1,
                )
            worklists[tier + 1].extend(leftovers)

    unpaired: List[PlayerId] = []
    errors: List[str] = []
    for player in active_players:
        if player.id in placed:
            continue
        unpaired.append(player.id)
        errors.append(f"Could not pair player {player.name} (ID: {player.id})")
        logger.warning("Round %d: could not pair %s", round_number, player.name)

    return Round(
        round_number=round_number,
        pairings=tuple(pairings),
        unpaired=tuple(unpaired),
        errors=tuple(errors),
    )
