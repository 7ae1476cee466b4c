import pytest

from BackEnd.core.modes import Mode, Thresholds
from BackEnd.services.categorizer import (
	BUCKETS, ON_TIME, OVER_TIME, TOO_SHORT, bucket_counts, bucket_for, categorize,
)


@pytest.mark.parametrize("duration, bucket", [
	(10, TOO_SHORT),
	(29, TOO_SHORT),
	(30, ON_TIME),
	(50, ON_TIME),
	(60, ON_TIME),
	(61, OVER_TIME),
	(65, OVER_TIME),
])
def test_bucket_for(make_entry, duration, bucket):
	assert bucket_for(make_entry(duration=duration)) == bucket


def test_uses_each_entrys_own_thresholds(make_entry):
	strict = make_entry("Alice", 50, t=Thresholds(10, 20, 40))
	loose = make_entry("Bob", 50, t=Thresholds(60, 90, 120))
	result = categorize([strict, loose])
	assert result[Mode.INTRODUCTIONS][OVER_TIME] == [strict]
	assert result[Mode.INTRODUCTIONS][TOO_SHORT] == [loose]


def test_groups_by_mode_in_first_seen_order(make_entry):
	history = [
		make_entry("A", 50, Mode.SPEECHES),
		make_entry("B", 10, Mode.INTRODUCTIONS),
		make_entry("C", 40, Mode.SPEECHES),
		make_entry("D", 45, Mode.SPEECHES),
	]
	result = categorize(history)
	assert list(result) == [Mode.SPEECHES, Mode.INTRODUCTIONS]
	assert [e.name for e in result[Mode.SPEECHES][ON_TIME]] == ["A", "C", "D"]
	assert result[Mode.INTRODUCTIONS] == {TOO_SHORT: [history[1]], ON_TIME: [], OVER_TIME: []}


def test_every_mode_has_all_buckets(make_entry):
	result = categorize([make_entry()])
	assert tuple(result[Mode.INTRODUCTIONS]) == BUCKETS


def test_categorize_is_repeatable(make_entry):
	history = [make_entry("A", 10), make_entry("B", 50), make_entry("C", 65)]
	first = categorize(history)
	second = categorize(history)
	assert first == second
	first[Mode.INTRODUCTIONS][ON_TIME].clear()
	assert categorize(history) == second
	assert [e.name for e in history] == ["A", "B", "C"]


def test_empty_history():
	assert categorize([]) == {}
	assert bucket_counts({}) == {}


def test_bucket_counts(make_entry):
	result = categorize([make_entry("A", 10), make_entry("B", 50), make_entry("C", 55)])
	assert bucket_counts(result) == {Mode.INTRODUCTIONS: {TOO_SHORT: 1, ON_TIME: 2, OVER_TIME: 0}}
