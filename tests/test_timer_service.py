import pytest

from BackEnd.core.errors import ValidationError
from BackEnd.core.modes import DisplayState, Mode, Thresholds
from BackEnd.services.timer_service import TimerService


@pytest.fixture
def timer(qapp):
	service = TimerService()
	yield service
	service.shutdown()


@pytest.mark.parametrize("name", ["", "   "])
def test_start_requires_speaker_name(timer, thresholds, name):
	with pytest.raises(ValidationError):
		timer.start(name, thresholds, Mode.INTRODUCTIONS)
	assert not timer.running
	assert timer.elapsed_sec == 0
	assert not timer.is_ticking()


@pytest.mark.parametrize("bad", [
	Thresholds(45, 45, 60),
	Thresholds(30, 60, 60),
	Thresholds(50, 45, 60),
	Thresholds(30, 70, 60),
])
def test_start_requires_increasing_thresholds(timer, bad):
	with pytest.raises(ValidationError):
		timer.start("Alice", bad, Mode.INTRODUCTIONS)
	assert not timer.running
	assert timer.elapsed_sec == 0


def test_start_arms_the_tick(timer, thresholds):
	states = []
	timer.state_changed.connect(states.append)
	timer.start("Alice", thresholds, Mode.INTRODUCTIONS)
	assert timer.running
	assert timer.is_ticking()
	assert timer.speaker_name == "Alice"
	assert states == ["running"]


def test_start_while_running_is_rejected(timer, thresholds, run_ticks):
	timer.start("Alice", thresholds, Mode.INTRODUCTIONS)
	run_ticks(timer, 3)
	with pytest.raises(ValidationError):
		timer.start("Bob", thresholds, Mode.INTRODUCTIONS)
	assert timer.speaker_name == "Alice"
	assert timer.elapsed_sec == 3


def test_display_state_follows_elapsed(timer, thresholds, run_ticks):
	seen = []
	timer.display_changed.connect(seen.append)
	timer.start("Alice", thresholds, Mode.INTRODUCTIONS)
	run_ticks(timer, 29)
	assert timer.display_state is DisplayState.DEFAULT
	run_ticks(timer, 1)
	assert timer.display_state is DisplayState.ON_PACE
	run_ticks(timer, 15)
	assert timer.display_state is DisplayState.WARNING
	run_ticks(timer, 15)
	assert timer.display_state is DisplayState.OVER_TIME
	assert seen == ["on_pace", "warning", "over_time"]


def test_stop_returns_the_finished_entry(timer, thresholds, run_ticks):
	timer.start("Alice", thresholds, Mode.INTRODUCTIONS)
	run_ticks(timer, 50)
	entry = timer.stop()
	assert timer.stop() is None
	assert entry.name == "Alice"
	assert entry.duration == 50
	assert entry.mode is Mode.INTRODUCTIONS
	assert entry.thresholds == thresholds
	assert entry.color is DisplayState.WARNING
	assert not timer.running
	assert not timer.is_ticking()
	assert timer.elapsed_sec == 0
	assert timer.speaker_name == ""
	assert timer.display_state is DisplayState.DEFAULT


def test_stop_when_idle_does_nothing(timer):
	states = []
	timer.state_changed.connect(states.append)
	assert timer.stop() is None
	assert states == []


def test_reset_discards_session(timer, thresholds, run_ticks):
	timer.start("Alice", thresholds, Mode.INTRODUCTIONS)
	run_ticks(timer, 40)
	timer.reset()
	assert timer.elapsed_sec == 0
	assert timer.speaker_name == ""
	assert timer.display_state is DisplayState.DEFAULT
	assert not timer.is_ticking()
	timer.reset()
	assert timer.elapsed_sec == 0
	assert not timer.running


def test_ticks_after_stop_are_ignored(timer, thresholds, run_ticks):
	timer.start("Alice", thresholds, Mode.INTRODUCTIONS)
	timer.stop()
	run_ticks(timer, 5)
	assert timer.elapsed_sec == 0


def test_shutdown_drops_running_session(timer, thresholds, run_ticks):
	timer.start("Alice", thresholds, Mode.INTRODUCTIONS)
	run_ticks(timer, 50)
	assert timer.display_state is DisplayState.WARNING
	timer.shutdown()
	assert not timer.is_ticking()
	assert not timer.running
	assert (timer.elapsed_sec, timer.speaker_name, timer.display_state) == (0, "", DisplayState.DEFAULT)
	assert timer.mode is None
	assert timer.thresholds is None
	assert timer.stop() is None
