from ciderplan.core.recommendations import (
    evaluate_recommendations,
    generate_recommendations,
)


def _codes(result):
    return [r.code for r in evaluate_recommendations(result)]


def test_healthy_middle_result_has_no_recommendations(make_result):
    assert evaluate_recommendations(make_result()) == []
    assert generate_recommendations(make_result()) == []


def test_slow_or_missing_breakeven_warns(make_result):
    assert "slow_breakeven" in _codes(make_result(breakeven_year=6))
    assert "slow_breakeven" in _codes(make_result(breakeven_year=None))
    assert "slow_breakeven" not in _codes(make_result(breakeven_year=5))


def test_fast_breakeven_is_positive(make_result):
    recommendations = evaluate_recommendations(make_result(breakeven_year=2))
    assert [(r.kind, r.code) for r in recommendations] == [
        ("positive", "fast_breakeven")
    ]
    assert "fast_breakeven" in _codes(make_result(breakeven_year=0))
    assert "fast_breakeven" not in _codes(make_result(breakeven_year=None))


def test_margin_thresholds(make_result):
    assert _codes(make_result(avg_gross_margin_percent=39.9)) == ["thin_gross_margin"]
    assert _codes(make_result(avg_ebitda_margin_percent=19.9)) == [
        "overhead_inefficiency"
    ]
    assert _codes(make_result(avg_ebitda_margin_percent=30.1)) == [
        "strong_ebitda_margin"
    ]
    assert _codes(make_result(avg_ebitda_margin_percent=30.0)) == []


def test_stalling_growth(make_result):
    # mid year (index 1) 200 -> last 210 is 5% growth
    assert _codes(make_result(revenues=(100.0, 200.0, 210.0))) == ["stalling_growth"]
    assert _codes(make_result(revenues=(100.0, 200.0, 240.0))) == []


def test_growth_check_skipped_without_mid_revenue(make_result):
    assert "stalling_growth" not in _codes(make_result(revenues=(100.0, 0.0, 0.0)))
    assert "stalling_growth" not in _codes(make_result(revenues=()))


def test_low_roi(make_result):
    assert _codes(make_result(roi_percent=49.9)) == ["low_roi"]
    assert _codes(make_result(roi_percent=-20.0)) == ["low_roi"]
    assert _codes(make_result(roi_percent=50.0)) == []


def test_struggling_result_fires_warnings_in_order(make_result):
    result = make_result(
        revenues=(100.0, 200.0, 200.0),
        avg_gross_margin_percent=10.0,
        avg_ebitda_margin_percent=-5.0,
        breakeven_year=None,
        roi_percent=-80.0,
    )
    recommendations = evaluate_recommendations(result)

    assert [r.code for r in recommendations] == [
        "slow_breakeven",
        "thin_gross_margin",
        "overhead_inefficiency",
        "stalling_growth",
        "low_roi",
    ]
    assert all(r.kind == "warning" for r in recommendations)
    assert generate_recommendations(result) == [r.message for r in recommendations]


def test_messages_mention_thresholds(make_result):
    messages = generate_recommendations(
        make_result(breakeven_year=None, avg_gross_margin_percent=0.0)
    )
    assert messages[0].startswith("Breakeven takes more than 5 years.")
    assert "40%" in messages[1]


def test_zero_roi_is_not_flagged(make_result):
    # zero is what the engine reports when there is no depreciation to divide by
    assert "low_roi" not in _codes(make_result(roi_percent=0.0))
