import pytest

from swisspairing.models import PairingConfig, Player
from swisspairing.pairing.colors import (
    ColorPreference,
    PreferenceStrength,
    calculate_color_preference,
)
from swisspairing.pairing.matching import (
    GreedyMatchingStrategy,
    is_admissible,
    score_pairing,
)
from swisspairing.type_hints import BLACK, WHITE


def _player(pid, rating=1500, **kwargs):
    return Player(id=pid, name=f"Player {pid}", rating=rating, **kwargs)


def _ids(partners):
    return [(a.id, b.id) for a, b in partners]


class TestAdmissibility:
    def test_player_cannot_meet_itself(self):
        ann = _player(1)
        assert not is_admissible(ann, ann, PairingConfig())

    def test_repeat_depends_on_config(self):
        ann, bob = _player(1, opponent_ids={2}), _player(2)

        assert not is_admissible(ann, bob, PairingConfig())
        assert is_admissible(ann, bob, PairingConfig(allow_repeats=True))

    def test_rating_limit(self):
        ann, bob = _player(1, 2000), _player(2, 1850)

        assert not is_admissible(ann, bob, PairingConfig(rating_difference_limit=100))
        assert is_admissible(ann, bob, PairingConfig(rating_difference_limit=150))
        assert is_admissible(ann, bob, PairingConfig())

    def test_strict_colors_rejects_clashing_absolute_preferences(self):
        ann = _player(1, color_history=(WHITE, WHITE))
        bob = _player(2, color_history=(WHITE, WHITE))
        preferences = {
            p.id: calculate_color_preference(p, PairingConfig()) for p in (ann, bob)
        }

        assert is_admissible(ann, bob, PairingConfig(), preferences)
        assert not is_admissible(
            ann, bob, PairingConfig(strict_colors=True), preferences
        )


class TestScorePairing:
    def test_rating_gap_penalty(self):
        assert score_pairing(_player(1, 2000), _player(2, 1900), {}) == pytest.approx(-10)

    def test_complementary_bonus_scales_with_strength(self):
        preferences = {
            1: ColorPreference(WHITE, PreferenceStrength.MILD),
            2: ColorPreference(BLACK, PreferenceStrength.STRONG),
        }

        score = score_pairing(_player(1, 2000), _player(2, 1900), preferences)

        assert score == pytest.approx(290)

    def test_differing_preferences_get_flat_bonus(self):
        preferences = {1: ColorPreference(WHITE, PreferenceStrength.MILD)}

        assert score_pairing(_player(1, 2000), _player(2, 1900), preferences) == pytest.approx(40)

    def test_equal_preferences_get_no_bonus(self):
        preferences = {
            1: ColorPreference(BLACK, PreferenceStrength.ABSOLUTE),
            2: ColorPreference(BLACK, PreferenceStrength.ABSOLUTE),
        }

        assert score_pairing(_player(1, 2000), _player(2, 1900), preferences) == pytest.approx(-10)


class TestGreedyMatchingStrategy:
    def test_upper_half_meets_lower_half(self):
        pool = [_player(i, 2500 - 100 * i) for i in range(1, 5)]

        partners, leftovers = GreedyMatchingStrategy().match(pool, {}, PairingConfig())

        assert _ids(partners) == [(1, 3), (2, 4)]
        assert leftovers == []

    def test_odd_pool_leaves_an_upper_half_player(self):
        pool = [_player(1, 2000), _player(2, 1900), _player(3, 1800)]

        partners, leftovers = GreedyMatchingStrategy().match(pool, {}, PairingConfig())

        assert _ids(partners) == [(1, 3)]
        assert [p.id for p in leftovers] == [2]

    def test_color_preferences_steer_partner_choice(self):
        config = PairingConfig()
        pool = [
            _player(1, 2400, color_history=(WHITE, WHITE)),
            _player(2, 2300),
            _player(3, 2200, color_history=(WHITE, WHITE)),
            _player(4, 2100, color_history=(BLACK, BLACK)),
        ]
        preferences = {p.id: calculate_color_preference(p, config) for p in pool}

        partners, _ = GreedyMatchingStrategy().match(pool, preferences, config)

        assert _ids(partners) == [(1, 4), (2, 3)]

    def test_unmatchable_players_are_left_over(self):
        pool = [
            _player(1, 2000, opponent_ids={2}),
            _player(2, 1900, opponent_ids={1}),
        ]

        partners, leftovers = GreedyMatchingStrategy().match(pool, {}, PairingConfig())

        assert partners == []
        assert [p.id for p in leftovers] == [1, 2]
