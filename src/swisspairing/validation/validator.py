"""Round Validator - certifies a round against competition rules.

Every check runs independently and adds to either the error list, which
makes a round unusable as-is, or the warning list, which only informs the
organizer. The validator knows nothing about how a round was produced, so
hand-built rounds are checked exactly like generated ones.
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

from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Set

from swisspairing.constants import BYE_OPPONENT_ID, MAX_SCORE_GROUP_GAP
from swisspairing.models import (
    Pairing,
    PairingConfig,
    Player,
    Round,
    players_by_id,
    ranking_key,
)
from swisspairing.type_hints import BLACK, WHITE, Colour, PlayerId
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class ValidationStats:
    """Aggregate numbers over one round."""

    total_pairings: int = 0
    bye_count: int = 0
    repeat_pairings: int = 0
    color_violations: int = 0
    rating_difference_avg: float = 0.0
    rating_difference_max: float = 0.0


@dataclass
class ValidationResult:
    """Verdict on a round.

    Attributes:
        errors: Violations that make the round illegal
        warnings: Noteworthy but non-fatal conditions
        stats: Aggregate statistics
    """

    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    stats: ValidationStats = field(default_factory=ValidationStats)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "stats": asdict(self.stats),
        }


@dataclass(frozen=True)
class ColorCheck:
    """Outcome of giving one player one color."""

    valid: bool = True
    reason: Optional[str] = None
    warning: Optional[str] = None


def check_color_allocation(
    player: Player, assigned_color: Colour, config: PairingConfig
) -> ColorCheck:
    """Check one color assignment against the player's history.

    Extending a run that already reached ``config.max_color_streak`` is a
    violation. Reaching a lifetime white/black difference of two or more is
    only worth a warning.
    """
    if not player.color_history:
        return ColorCheck()

    streak, last_color = player.color_streak
    if streak >= config.max_color_streak and last_color == assigned_color:
        return ColorCheck(
            valid=False,
            reason=(
                f"Has streak of {streak} {last_color}, "
                f"max allowed is {config.max_color_streak}"
            ),
        )

    whites = player.color_history.count(WHITE)
    blacks = len(player.color_history) - whites
    if assigned_color == WHITE:
        whites += 1
    else:
        blacks += 1
    new_imbalance = whites - blacks

    if abs(new_imbalance) >= 2:
        return ColorCheck(
            warning=f"Color imbalance will be {new_imbalance:+d} ({whites}W, {blacks}B)"
        )

    return ColorCheck()


def validate_pairings(
    round_: Round, players: Iterable[Player], config: PairingConfig
) -> ValidationResult:
    """Validate a round against the roster and configuration.

    Args:
        round_: Round to check, generated or built by hand
        players: Full roster, withdrawn players included
        config: The configuration the round was meant to follow

    Returns:
        ValidationResult, valid exactly when no errors were found
    """
    roster = list(players)
    player_map = players_by_id(roster)
    result = ValidationResult()
    stats = result.stats
    stats.total_pairings = len(round_.pairings)

    rating_gaps: List[float] = []

    for pairing in round_.pairings:
        if pairing.is_bye:
            stats.bye_count += 1
            _check_bye(pairing, player_map, result)
            continue

        white = player_map.get(pairing.white_id)
        black = player_map.get(pairing.black_id)
        if white is None:
            result.errors.append(f"Unknown white player ID {pairing.white_id}")
            continue
        if black is None:
            result.errors.append(f"Unknown black player ID {pairing.black_id}")
            continue

        for player in (white, black):
            if player.is_withdrawn:
                result.errors.append(f"Withdrawn player {player.name} is paired")

        if white.has_met(black):
            stats.repeat_pairings += 1
            if config.allow_repeats:
                result.warnings.append(
                    f"Repeat pairing: {white.name} vs {black.name} (allowed by config)"
                )
            else:
                result.errors.append(
                    f"Forbidden repeat pairing: {white.name} vs {black.name}"
                )

        rating_gap = abs(white.rating - black.rating)
        rating_gaps.append(rating_gap)
        limit = config.rating_limit
        if limit is not None and rating_gap > limit:
            result.errors.append(
                f"Rating difference exceeds limit: {white.name} ({white.rating}) "
                f"vs {black.name} ({black.rating}) - diff: {rating_gap}"
            )

        if config.score_groups and abs(white.score - black.score) > MAX_SCORE_GROUP_GAP:
            result.warnings.append(
                f"Players from distant score groups: {white.name} ({white.score}) "
                f"vs {black.name} ({black.score})"
            )

        for player, color in ((white, WHITE), (black, BLACK)):
            check = check_color_allocation(player, color, config)
            if not check.valid:
                stats.color_violations += 1
                result.errors.append(
                    f"Color violation for {player.name} ({color.lower()}): {check.reason}"
                )
            if check.warning:
                result.warnings.append(
                    f"{player.name} ({color.lower()}): {check.warning}"
                )

    if rating_gaps:
        stats.rating_difference_avg = sum(rating_gaps) / len(rating_gaps)
        stats.rating_difference_max = max(rating_gaps)

    _check_duplicates(round_, result)
    _check_board_numbers(round_.pairings, result)
    _check_unpaired(round_, roster, player_map, result)

    logger.info(
        "Round %d validated: %s, %d errors, %d warnings",
        round_.round_number,
        "valid" if result.is_valid else "invalid",
        len(result.errors),
        len(result.warnings),
    )
    return result


def _check_bye(
    pairing: Pairing, player_map: Dict[PlayerId, Player], result: ValidationResult
) -> None:
    if pairing.black_id != BYE_OPPONENT_ID:
        result.errors.append(
            f"Bye on board {pairing.board_number} names opponent ID {pairing.black_id}"
        )
    player = player_map.get(pairing.white_id)
    if player is None:
        result.errors.append(f"Bye assigned to unknown player ID {pairing.white_id}")
        return
    if player.has_bye:
        result.errors.append(f"Player {player.name} already received a bye")
    if player.is_withdrawn:
        result.errors.append(f"Withdrawn player {player.name} received a bye")


def _check_duplicates(round_: Round, result: ValidationResult) -> None:
    """Each player may sit on one board only."""
    seen_on_bye: Set[PlayerId] = set()
    seen_in_game: Set[PlayerId] = set()

    for pairing in round_.pairings:
        for player_id in pairing.player_ids:
            if player_id in seen_on_bye or player_id in seen_in_game:
                mixed = (player_id in seen_on_bye) != pairing.is_bye
                detail = " (bye and regular pairing)" if mixed else ""
                result.errors.append(f"Player {player_id} paired multiple times{detail}")
            if pairing.is_bye:
                seen_on_bye.add(player_id)
            else:
                seen_in_game.add(player_id)


def _check_board_numbers(pairings: Iterable[Pairing], result: ValidationResult) -> None:
    board_numbers = sorted(p.board_number for p in pairings)
    for expected, board_number in enumerate(board_numbers, start=1):
        if board_number != expected:
            result.warnings.append(
                f"Board numbers not sequential: expected {expected}, got {board_number}"
            )
            break


def _check_unpaired(
    round_: Round,
    roster: List[Player],
    player_map: Dict[PlayerId, Player],
    result: ValidationResult,
) -> None:
    active_players = [p for p in roster if not p.is_withdrawn]
    placed = set(round_.iter_player_ids())

    if round_.unpaired:
        max_expected_unpaired = len(active_players) % 2
        if len(round_.unpaired) > max_expected_unpaired:
            result.errors.append(
                f"Too many unpaired players: {len(round_.unpaired)} "
                f"(expected max {max_expected_unpaired})"
            )

    for player_id, count in Counter(round_.unpaired).items():
        player = player_map.get(player_id)
        name = player.name if player is not None else f"ID {player_id}"
        result.warnings.append(f"Unpaired player: {name}")
        if player_id in placed:
            result.errors.append(f"Player {name} is both paired and listed as unpaired")
        if count > 1:
            result.errors.append(f"Player {name} listed as unpaired {count} times")

    listed = placed.union(round_.unpaired)
    for player in active_players:
        if player.id not in listed:
            result.warnings.append(
                f"Active player {player.name} is neither paired nor listed as unpaired"
            )


def validate_accelerated_pairings(
    round_: Round, players: Iterable[Player], config: PairingConfig
) -> ValidationResult:
    """Validate a round, adding accelerated pairing checks where they apply.

    In an accelerated round the top half of the field by rating is expected
    to meet the bottom half. Every game inside one half is worth a warning.
    """
    roster = list(players)
    result = validate_pairings(round_, roster, config)
    if not config.is_accelerated(round_.round_number):
        return result

    ranked = sorted((p for p in roster if not p.is_withdrawn), key=ranking_key)
    midpoint = (len(ranked) + 1) // 2
    top_half = {p.id for p in ranked[:midpoint]}

    for pairing in round_.games:
        white_in_top = pairing.white_id in top_half
        black_in_top = pairing.black_id in top_half
        if white_in_top == black_in_top:
            half = "top" if white_in_top else "bottom"
            result.warnings.append(
                f"Accelerated pairing anomaly on board {pairing.board_number}: "
                f"both players in {half} half"
            )

    return result
