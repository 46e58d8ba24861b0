import pytest
import utils

from oner import MISSING, DatasetView, Example, tally


@pytest.fixture
def weather_view() -> DatasetView:
    return DatasetView(
        utils.make_examples(
            ["weather"],
            [("sun", "play"), ("sun", "play"), ("rain", "stay"), ("rain", "play")],
        )
    )


def test_tally_counts_classes_per_value(weather_view: DatasetView):
    result = tally(weather_view, "weather")

    assert result.attribute == "weather"
    assert result.counts == {"sun": {"play": 2}, "rain": {"stay": 1, "play": 1}}
    assert result.total == 4
    assert len(result) == 2


def test_tally_keeps_first_seen_order(weather_view: DatasetView):
    result = tally(weather_view, "weather")

    assert result.values == ["sun", "rain"]
    assert list(result.counts["rain"]) == ["stay", "play"]


def test_tally_is_fresh_for_each_call(weather_view: DatasetView):
    first = tally(weather_view, "weather")
    second = tally(weather_view, "weather")

    assert first == second
    assert first.counts is not second.counts


def test_tally_treats_missing_values_as_separate_value():
    view = DatasetView(
        [
            Example(label="a", values={"x": 1}),
            Example(label="b", values={"x": None}),
            Example(label="b", values={"x": float("nan")}),
            Example(label="b", values={}),
        ],
        ["x"],
    )

    result = tally(view, "x")

    assert result.counts == {1: {"a": 1}, MISSING: {"b": 3}}
    assert result.total == len(view)

