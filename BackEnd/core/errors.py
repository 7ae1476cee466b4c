class SpeechTimerError(Exception):
	"""Base class for errors surfaced to the user."""


class ValidationError(SpeechTimerError):
	"""Bad input at session start: empty name, unordered thresholds."""


class StorageError(SpeechTimerError):
	"""History snapshot or report file could not be written."""
