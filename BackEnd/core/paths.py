import os
from pathlib import Path

APP_NAME = "SpeechTimer"

def user_data_dir(app_name=APP_NAME):
	"""Return per-user data dir (Windows/macOS/Linux).

	SPEECH_TIMER_DATA_DIR, when set, wins over the platform default.
	"""
	override = os.environ.get("SPEECH_TIMER_DATA_DIR")
	if override:
		path = Path(override)
	else:
		if os.name == "nt":
			base = os.environ.get("LOCALAPPDATA", os.path.expanduser("~\\AppData\\Local"))
		elif os.name == "posix":
			base = os.environ.get("XDG_DATA_HOME", os.path.expanduser("~/.local/share"))
		else:
			base = os.path.expanduser("~")
		path = Path(base) / app_name
	path.mkdir(parents=True, exist_ok=True)
	return path

def history_path():
	"""Return Path to history.json inside user data dir."""
	return user_data_dir() / "history.json"

def reports_dir():
	"""Default folder for exported PDF reports."""
	path = user_data_dir() / "reports"
	path.mkdir(parents=True, exist_ok=True)
	return path
