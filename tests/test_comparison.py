from swisspairing.models import Pairing, Round
from swisspairing.validation import (
    ValidationResult,
    ValidationStats,
    compare_validation_results,
    quick_validate,
)


def test_quick_validate_summarises_round():
    round_ = Round(
        round_number=1,
        pairings=(Pairing(1, 2, 1),),
        unpaired=(3,),
        errors=("Could not pair player Player 3 (ID: 3)",),
    )

    summary = quick_validate(round_)

    assert summary.has_errors
    assert summary.has_pairings
    assert summary.pairing_count == 1
    assert summary.unpaired_count == 1


def test_quick_validate_empty_round():
    summary = quick_validate(Round(round_number=1))

    assert not summary.has_errors
    assert not summary.has_pairings


def test_valid_result_beats_invalid_one():
    valid = ValidationResult()
    invalid = ValidationResult(errors=["Player 1 paired multiple times"])

    assert compare_validation_results(valid, invalid).better == 1
    assert compare_validation_results(invalid, valid).better == 2


def test_stats_decide_between_valid_results():
    tidy = ValidationResult(stats=ValidationStats(rating_difference_avg=50.0))
    messy = ValidationResult(
        warnings=["Unpaired player: Player 3"],
        stats=ValidationStats(repeat_pairings=1, rating_difference_avg=120.0),
    )

    outcome = compare_validation_results(messy, tidy)

    assert outcome.better == 2
    assert outcome.reason == "Better quality (score 3 vs 0)"


def test_identical_results_tie():
    outcome = compare_validation_results(ValidationResult(), ValidationResult())

    assert outcome.better is None
    assert outcome.reason == "Equal quality"
