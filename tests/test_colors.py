import pytest

from swisspairing.models import PairingConfig, Player
from swisspairing.pairing.colors import (
    ColorPreference,
    PreferenceStrength,
    assign_colors,
    calculate_color_preference,
)
from swisspairing.type_hints import BLACK, WHITE

W, B = WHITE, BLACK


def _player(pid, rating=1500, history=()):
    return Player(id=pid, name=f"Player {pid}", rating=rating, color_history=history)


@pytest.mark.parametrize(
    "history, max_streak, expected_color, expected_strength",
    [
        ((), 2, None, PreferenceStrength.NONE),
        ((W,), 2, B, PreferenceStrength.MILD),
        ((B, W, B), 2, W, PreferenceStrength.MILD),
        ((B, W), 2, None, PreferenceStrength.NONE),
        ((W, W), 2, B, PreferenceStrength.ABSOLUTE),
        ((W, B, B), 2, W, PreferenceStrength.ABSOLUTE),
        ((W, W, B, W), 2, B, PreferenceStrength.STRONG),
        ((W, W), 3, B, PreferenceStrength.STRONG),
        ((B, B, B), 3, W, PreferenceStrength.ABSOLUTE),
    ],
)
def test_calculate_color_preference(
    history, max_streak, expected_color, expected_strength
):
    config = PairingConfig(max_color_streak=max_streak)

    preference = calculate_color_preference(_player(1, history=history), config)

    assert preference.color == expected_color
    assert preference.strength == expected_strength


def _assign(first, second, first_pref=None, second_pref=None):
    preferences = {}
    if first_pref:
        preferences[first.id] = ColorPreference(*first_pref)
    if second_pref:
        preferences[second.id] = ColorPreference(*second_pref)
    white, black = assign_colors(first, second, preferences)
    return white.id, black.id


def test_complementary_preferences_are_both_honored():
    first, second = _player(1, 2000), _player(2, 1900)

    assert _assign(
        first, second, (B, PreferenceStrength.MILD), (W, PreferenceStrength.MILD)
    ) == (2, 1)


def test_strong_preference_is_honored():
    first, second = _player(1, 2000), _player(2, 1900)

    assert _assign(first, second, None, (B, PreferenceStrength.STRONG)) == (1, 2)
    assert _assign(first, second, (B, PreferenceStrength.STRONG), None) == (2, 1)


def test_higher_strength_wins_conflict():
    first, second = _player(1, 2000), _player(2, 1900)

    white, _ = _assign(
        first, second, (W, PreferenceStrength.STRONG), (W, PreferenceStrength.ABSOLUTE)
    )

    assert white == 2


def test_equal_absolute_conflict_serves_acting_player():
    first, second = _player(1, 2000), _player(2, 1900)

    assert _assign(
        first, second, (B, PreferenceStrength.ABSOLUTE), (B, PreferenceStrength.ABSOLUTE)
    ) == (2, 1)


def test_mild_preferences_fall_back_to_rating():
    lower, higher = _player(1, 1800), _player(2, 1900)

    assert _assign(lower, higher) == (2, 1)
    assert _assign(lower, higher, (W, PreferenceStrength.MILD), None) == (2, 1)


def test_equal_ratings_give_white_to_acting_player():
    assert _assign(_player(1, 1800), _player(2, 1800)) == (1, 2)
