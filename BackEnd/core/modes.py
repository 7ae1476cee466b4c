"""Speaking modes, threshold sets and the elapsed-time classification."""

from dataclasses import dataclass
from enum import Enum

TICK_INTERVAL_MS = 1000


class Mode(str, Enum):
	INTRODUCTIONS = "Introductions"
	TABLE_TOPICS = "Table Topics"
	SPEECHES = "Speeches"


class DisplayState(str, Enum):
	DEFAULT = "default"
	ON_PACE = "on_pace"
	WARNING = "warning"
	OVER_TIME = "over_time"


# user-facing color name -> Thresholds attribute
COLOR_FIELDS = {
	"green": "on_pace",
	"yellow": "warning",
	"red": "over_time",
}


@dataclass(frozen=True)
class Thresholds:
	on_pace: int
	warning: int
	over_time: int

	def is_ordered(self) -> bool:
		return self.on_pace < self.warning < self.over_time

	def for_color(self, color: str) -> int:
		try:
			return getattr(self, COLOR_FIELDS[color])
		except KeyError:
			raise ValueError(f"unknown color {color!r}") from None

	def to_timings(self) -> dict:
		"""Serialized form, keyed by color name."""
		return {color: getattr(self, attr) for color, attr in COLOR_FIELDS.items()}

	@classmethod
	def from_timings(cls, timings: dict) -> "Thresholds":
		values = {}
		for color, attr in COLOR_FIELDS.items():
			value = timings[color]
			if isinstance(value, bool) or not isinstance(value, int) or value < 0:
				raise ValueError(f"bad {color} timing: {value!r}")
			values[attr] = value
		return cls(**values)


DEFAULT_THRESHOLDS = {
	Mode.INTRODUCTIONS: Thresholds(on_pace=30, warning=45, over_time=60),
	Mode.TABLE_TOPICS: Thresholds(on_pace=60, warning=90, over_time=120),
	Mode.SPEECHES: Thresholds(on_pace=300, warning=360, over_time=420),
}

DEFAULT_MODE = Mode.INTRODUCTIONS


def classify(elapsed: int, thresholds: Thresholds) -> DisplayState:
	"""Map elapsed seconds onto the display state of a running session.

	The four half-open ranges cover [0, inf) without overlap, as long as the
	thresholds are ordered.
	"""
	if elapsed >= thresholds.over_time:
		return DisplayState.OVER_TIME
	if elapsed >= thresholds.warning:
		return DisplayState.WARNING
	if elapsed >= thresholds.on_pace:
		return DisplayState.ON_PACE
	return DisplayState.DEFAULT
