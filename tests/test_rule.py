import pytest
import utils

from oner import (
    MISSING,
    Case,
    DatasetView,
    EmptyDatasetError,
    FrequencyTally,
    Rule,
    build,
    evaluate,
    interpret,
    score,
    tally,
)


@pytest.fixture
def weather_rule() -> Rule:
    view = DatasetView(
        utils.make_examples(
            ["weather"],
            [("sun", "play"), ("sun", "play"), ("rain", "stay"), ("rain", "play")],
        )
    )
    return build(tally(view, "weather"))


def test_build_picks_majority_class(weather_rule: Rule):
    assert weather_rule.attribute == "weather"
    assert weather_rule.cases == (
        Case(attribute_value="sun", predicted_class="play", correct=2, incorrect=0),
        Case(attribute_value="rain", predicted_class="stay", correct=1, incorrect=1),
    )
    assert weather_rule.predictions == {"sun": "play", "rain": "stay"}


def test_build_tie_goes_to_class_seen_first_for_value():
    view = DatasetView(
        utils.make_examples(
            ["x"],
            [("a", "no"), ("b", "yes"), ("b", "no"), ("a", "yes")],
        )
    )

    rule = build(tally(view, "x"))

    assert rule.predictions == {"a": "no", "b": "yes"}


def test_build_counts_add_up_to_dataset_size(weather_rule: Rule):
    assert weather_rule.correct == 3
    assert weather_rule.incorrect == 1
    assert weather_rule.total == 4
    assert sum(case.covered for case in weather_rule.cases) == 4


def test_build_from_empty_tally():
    rule = build(FrequencyTally(attribute="x", counts={}))

    assert rule.cases == ()
    with pytest.raises(EmptyDatasetError):
        _ = rule.accuracy


def test_build_overrides_attribute():
    rule = build(FrequencyTally(attribute="x", counts={1: {"a": 1}}), attribute="y")

    assert rule.attribute == "y"


def test_score(weather_rule: Rule):
    assert score(weather_rule, 4) == 0.75
    assert weather_rule.accuracy == 0.75


def test_score_on_empty_dataset(weather_rule: Rule):
    with pytest.raises(EmptyDatasetError):
        score(weather_rule, 0)


def test_score_with_too_few_examples(weather_rule: Rule):
    with pytest.raises(ValueError):
        score(weather_rule, 2)


def test_rule_rendering(weather_rule: Rule):
    assert str(weather_rule) == (
        "IF weather = sun THEN play\n" "IF weather = rain THEN stay"
    )


def test_interpret(weather_rule: Rule):
    assert interpret(weather_rule, "sun") == "play"
    assert interpret(weather_rule, "snow") is None


def test_interpret_missing_value():
    rule = Rule(
        attribute="x",
        cases=(
            Case(attribute_value=MISSING, predicted_class="a", correct=1, incorrect=0),
        ),
    )

    assert interpret(rule, None) == "a"
    assert interpret(rule, float("nan")) == "a"


def test_evaluate_counts_unseen_values_as_wrong(weather_rule: Rule):
    accuracy = evaluate(
        weather_rule,
        ["sun", "rain", "snow", "sun"],
        ["play", "stay", "stay", "stay"],
    )

    assert accuracy == 0.5


def test_evaluate_validation(weather_rule: Rule):
    with pytest.raises(EmptyDatasetError):
        evaluate(weather_rule, [], [])
    with pytest.raises(ValueError):
        evaluate(weather_rule, ["sun"], [])
