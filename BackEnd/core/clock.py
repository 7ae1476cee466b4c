from datetime import datetime, timezone

def utc_now():
	"""Return current UTC time (no microseconds)."""
	return datetime.now(timezone.utc).replace(microsecond=0)

def file_stamp(moment: datetime) -> str:
	"""ISO8601 timestamp to the second with ':' and 'T' turned into '_'."""
	iso = moment.astimezone(timezone.utc).replace(tzinfo=None, microsecond=0).isoformat()
	return iso.replace(":", "_").replace("T", "_")

def local_stamp(moment: datetime) -> str:
	"""Human readable local date and time, used in report titles."""
	return moment.astimezone().strftime("%Y-%m-%d %H:%M:%S")

def to_seconds(minutes: int, seconds: int) -> int:
	return minutes * 60 + seconds

def split_mmss(total: int):
	"""Split seconds into a (minutes, seconds) pair."""
	return total // 60, total % 60

def fmt_mmss(seconds: int) -> str:
	"""Format seconds as MM:SS (minutes keep growing past 99)."""
	m, s = split_mmss(seconds)
	return f"{m:02}:{s:02}"
