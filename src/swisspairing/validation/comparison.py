"""Quick checks and side-by-side comparison of validation verdicts."""

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
from typing import Optional

from swisspairing.models import Round
from swisspairing.validation.validator import ValidationResult


@dataclass(frozen=True)
class RoundSummary:
    has_errors: bool
    has_pairings: bool
    pairing_count: int
    unpaired_count: int


def quick_validate(round_: Round) -> RoundSummary:
    """Cheap summary of a round without looking at the roster."""
    return RoundSummary(
        has_errors=bool(round_.errors),
        has_pairings=bool(round_.pairings),
        pairing_count=len(round_.pairings),
        unpaired_count=len(round_.unpaired),
    )


@dataclass(frozen=True)
class ComparisonOutcome:
    """Which of two verdicts describes the better round.

    ``better`` is 1 or 2, or None for a tie.
    """

    better: Optional[int]
    reason: str


def compare_validation_results(
    first: ValidationResult, second: ValidationResult
) -> ComparisonOutcome:
    """Compare the quality of two rounds through their verdicts.

    Validity decides first. Otherwise each round earns a point for fewer
    repeat pairings, fewer color violations, a lower average rating gap and
    fewer warnings.
    """
    if first.is_valid and not second.is_valid:
        return ComparisonOutcome(1, "Result 1 is valid, Result 2 has errors")
    if second.is_valid and not first.is_valid:
        return ComparisonOutcome(2, "Result 2 is valid, Result 1 has errors")

    measures = [
        (first.stats.repeat_pairings, second.stats.repeat_pairings),
        (first.stats.color_violations, second.stats.color_violations),
        (first.stats.rating_difference_avg, second.stats.rating_difference_avg),
        (len(first.warnings), len(second.warnings)),
    ]
    first_points = sum(1 for a, b in measures if a < b)
    second_points = sum(1 for a, b in measures if b < a)

    if first_points > second_points:
        return ComparisonOutcome(
            1, f"Better quality (score {first_points} vs {second_points})"
        )
    if second_points > first_points:
        return ComparisonOutcome(
            2, f"Better quality (score {second_points} vs {first_points})"
        )
    return ComparisonOutcome(None, "Equal quality")
