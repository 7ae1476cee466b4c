from dataclasses import dataclass

from BackEnd.core.modes import DisplayState, Mode, Thresholds


@dataclass(frozen=True)
class HistoryEntry:
	"""One completed session. Never changed after it is recorded."""
	name: str
	duration: int
	mode: Mode
	thresholds: Thresholds
	color: DisplayState = DisplayState.DEFAULT

	def to_dict(self) -> dict:
		return {
			"name": self.name,
			"duration": self.duration,
			"color": self.color.value,
			"mode": self.mode.value,
			"timings": self.thresholds.to_timings(),
		}

	@classmethod
	def from_dict(cls, data: dict) -> "HistoryEntry":
		"""Build an entry from its stored form; raises ValueError/KeyError/TypeError when malformed."""
		name = data["name"]
		duration = data["duration"]
		if not isinstance(name, str):
			raise TypeError(f"name must be a string, got {name!r}")
		if isinstance(duration, bool) or not isinstance(duration, int) or duration < 0:
			raise ValueError(f"bad duration: {duration!r}")
		try:
			color = DisplayState(data.get("color", DisplayState.DEFAULT.value))
		except ValueError:
			# hex background values are not display states
			color = DisplayState.DEFAULT
		return cls(
			name=name,
			duration=duration,
			mode=Mode(data["mode"]),
			thresholds=Thresholds.from_timings(data["timings"]),
			color=color,
		)
