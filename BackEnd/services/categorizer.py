"""Group recorded sessions by mode and by how they ended up against their thresholds."""

TOO_SHORT = "tooShort"
ON_TIME = "onTime"
OVER_TIME = "overTime"

# fixed display/report order
BUCKETS = (TOO_SHORT, ON_TIME, OVER_TIME)

BUCKET_LABELS = {
	TOO_SHORT: "Too Short",
	ON_TIME: "On Time",
	OVER_TIME: "Over Time",
}


def bucket_for(entry) -> str:
	"""Outcome of one entry, judged by the thresholds it was recorded with."""
	t = entry.thresholds
	if entry.duration < t.on_pace:
		return TOO_SHORT
	if entry.duration <= t.over_time:
		return ON_TIME
	return OVER_TIME


def categorize(history):
	"""Return {mode: {bucket: [entries]}}.

	Modes appear in order of first occurrence and every bucket keeps history
	order. Builds new lists on every call; the input is not touched.
	"""
	categorized = {}
	for entry in history:
		buckets = categorized.get(entry.mode)
		if buckets is None:
			buckets = categorized[entry.mode] = {b: [] for b in BUCKETS}
		buckets[bucket_for(entry)].append(entry)
	return categorized


def bucket_counts(categorized):
	"""{mode: {bucket: count}} for charts."""
	return {
		mode: {b: len(entries) for b, entries in buckets.items()}
		for mode, buckets in categorized.items()
	}
