"""PDF export of the categorized history.

Layout happens in millimetres on an A4 page: build_report_lines() decides
what goes on the report, paginate() where it goes, and render_pdf() hands the
result to Qt's PDF writer.
"""

import logging
from collections import namedtuple
from pathlib import Path

from PySide6.QtCore import QMarginsF, QPointF
from PySide6.QtGui import QColor, QFont, QPageLayout, QPageSize, QPainter, QPdfWriter

from BackEnd.core.clock import file_stamp, fmt_mmss, local_stamp, utc_now
from BackEnd.core.errors import StorageError
from BackEnd.core.paths import reports_dir
from BackEnd.services.categorizer import BUCKETS, BUCKET_LABELS

logger = logging.getLogger(__name__)

REPORT_PREFIX = "Speech_Timer_Report"
REPORT_TITLE = "Speech Timer Report"

PAGE_TOP_MM = 20
NEW_PAGE_TOP_MM = 10
PAGE_BOTTOM_MM = 280

ReportLine = namedtuple("ReportLine", "kind text")
Placed = namedtuple("Placed", "line y")

# kind -> (point size, gray level, left indent mm or None to center, space before, space after)
LINE_STYLES = {
	"title": (18, 0, None, 0, 10),
	"mode": (16, 0, 10, 10, 6),
	"bucket": (14, 100, 14, 0, 6),
	"entry": (12, 50, 18, 0, 6),
}


def report_filename(moment) -> str:
	return f"{REPORT_PREFIX}_{file_stamp(moment)}.pdf"


def build_report_lines(categorized, moment):
	lines = [ReportLine("title", f"{REPORT_TITLE} - {local_stamp(moment)}")]
	for mode, buckets in categorized.items():
		lines.append(ReportLine("mode", getattr(mode, "value", str(mode))))
		for bucket in BUCKETS:
			entries = buckets.get(bucket, [])
			if not entries:
				continue
			lines.append(ReportLine("bucket", BUCKET_LABELS[bucket]))
			for entry in entries:
				lines.append(ReportLine("entry", f"{entry.name}: {fmt_mmss(entry.duration)}"))
	return lines


def paginate(lines, top=PAGE_TOP_MM, new_page_top=NEW_PAGE_TOP_MM, bottom=PAGE_BOTTOM_MM):
	"""Give every line a baseline; a line that would fall below bottom opens a new page."""
	pages = [[]]
	y = top
	for line in lines:
		_, _, _, before, after = LINE_STYLES[line.kind]
		y += before
		if y > bottom:
			pages.append([])
			y = new_page_top
		pages[-1].append(Placed(line, y))
		y += after
	return pages


def render_pdf(pages, path):
	writer = QPdfWriter(str(path))
	writer.setPageSize(QPageSize(QPageSize.PageSizeId.A4))
	writer.setPageMargins(QMarginsF(0, 0, 0, 0), QPageLayout.Unit.Millimeter)
	writer.setTitle(REPORT_TITLE)
	px_per_mm = writer.resolution() / 25.4
	painter = QPainter()
	if not painter.begin(writer):
		raise StorageError(f"could not open {path} for writing")
	try:
		for i, page in enumerate(pages):
			if i:
				writer.newPage()
			for placed in page:
				size, gray, indent, _, _ = LINE_STYLES[placed.line.kind]
				font = QFont()
				font.setPointSize(size)
				if placed.line.kind in ("title", "mode"):
					font.setBold(True)
				painter.setFont(font)
				painter.setPen(QColor(gray, gray, gray))
				if indent is None:
					x = (writer.width() - painter.fontMetrics().horizontalAdvance(placed.line.text)) / 2
				else:
					x = indent * px_per_mm
				painter.drawText(QPointF(x, placed.y * px_per_mm), placed.line.text)
	finally:
		painter.end()


def export_report(categorized, directory=None, moment=None):
	"""Write the report PDF and return its path."""
	moment = moment or utc_now()
	directory = Path(directory) if directory else reports_dir()
	try:
		directory.mkdir(parents=True, exist_ok=True)
	except OSError as e:
		raise StorageError(f"could not create {directory}: {e}") from e
	path = directory / report_filename(moment)
	try:
		# a report from the same second is replaced
		path.unlink(missing_ok=True)
	except OSError as e:
		raise StorageError(f"could not replace {path}: {e}") from e
	pages = paginate(build_report_lines(categorized, moment))
	render_pdf(pages, path)
	if not path.exists():
		raise StorageError(f"report was not written to {path}")
	logger.info("Exported report with %d page(s) to %s", len(pages), path)
	return path
