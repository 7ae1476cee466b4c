import logging
from dataclasses import replace

from BackEnd.core.clock import split_mmss, to_seconds
from BackEnd.core.modes import COLOR_FIELDS, DEFAULT_THRESHOLDS, Mode, Thresholds

logger = logging.getLogger(__name__)

TIME_FIELDS = ("minutes", "seconds")


class ThresholdStore:
	"""Holds the green/yellow/red thresholds for every mode.

	Edits are not validated against each other; a set may be unordered until
	the next session start checks it.
	"""

	def __init__(self, defaults=None):
		self._thresholds = dict(defaults or DEFAULT_THRESHOLDS)

	def modes(self):
		return list(self._thresholds)

	def get_thresholds(self, mode: Mode) -> Thresholds:
		return self._thresholds[Mode(mode)]

	def get_mmss(self, mode: Mode, color: str):
		"""(minutes, seconds) pair of one color, as shown in the inputs."""
		return split_mmss(self.get_thresholds(mode).for_color(color))

	def set_threshold(self, mode: Mode, color: str, field: str, value: int) -> Thresholds:
		if color not in COLOR_FIELDS:
			raise ValueError(f"unknown color {color!r}")
		if field not in TIME_FIELDS:
			raise ValueError(f"unknown field {field!r}")
		mode = Mode(mode)
		current = self._thresholds[mode]
		minutes, seconds = split_mmss(current.for_color(color))
		value = int(value)
		if field == "minutes":
			minutes = max(0, value)
		else:
			seconds = min(max(0, value), 59)
		updated = replace(current, **{COLOR_FIELDS[color]: to_seconds(minutes, seconds)})
		self._thresholds[mode] = updated
		logger.debug("%s %s %s -> %s", mode.value, color, field, updated)
		return updated
