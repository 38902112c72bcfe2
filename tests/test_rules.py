import pytest

from blockfall.game import ScoringRules


@pytest.mark.parametrize("score, high", [(0, 0), (300, 1200), (999, 0), (4500, 4500)])
def test_zero_clears_leave_score_unchanged(score, high):
    rules = ScoringRules()
    assert rules.update(score, high, 0) == (score, score // 1000 + 1, max(score, high))


@pytest.mark.parametrize("cleared", [1, 2, 3, 4])
def test_each_cleared_line_is_worth_one_hundred(cleared):
    new_score, _, _ = ScoringRules().update(250, 0, cleared)
    assert new_score == 250 + 100 * cleared


def test_level_rises_every_thousand_points():
    assert ScoringRules().update(950, 0, 1) == (1050, 2, 1050)
    assert ScoringRules().level_for(0) == 1
    assert ScoringRules().level_for(2999) == 3


def test_high_score_is_kept_when_higher():
    assert ScoringRules().update(0, 5000, 4) == (400, 1, 5000)


def test_starting_level_offsets_levels():
    assert ScoringRules(starting_level=3).level_for(1500) == 4
