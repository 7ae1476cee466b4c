from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QTableWidget, QTableWidgetItem, QSizePolicy
from PySide6.QtGui import QColor
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator
from BackEnd.core.clock import fmt_mmss
from BackEnd.services.categorizer import BUCKETS, BUCKET_LABELS, bucket_counts
from FrontEnd.styles.design_tokens import BUCKET_BAR_COLORS, BUCKET_COLORS, COLORS


class HistoryPanel(QWidget):
	"""Categorized history: a bar chart of outcomes per mode above a grouped table."""

	def __init__(self):
		super().__init__()
		layout = QVBoxLayout()
		layout.setContentsMargins(16, 16, 16, 16)
		title = QLabel("History")
		title.setStyleSheet(f"font-size: 22px; font-weight: 600; color: {COLORS['text_strong']};")
		layout.addWidget(title)

		self.figure = Figure(figsize=(5, 2.2))
		self.canvas = FigureCanvas(self.figure)
		layout.addWidget(self.canvas)

		self.table = QTableWidget()
		self.table.setColumnCount(4)
		self.table.setHorizontalHeaderLabels(["Mode", "Outcome", "Speaker", "Duration"])
		self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
		self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
		self.table.verticalHeader().setVisible(False)
		self.table.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		layout.addWidget(self.table)
		self.setLayout(layout)
		self.setStyleSheet(f"background: {COLORS['surface']}; border-radius: 12px;")

	def set_history(self, categorized):
		rows = []
		for mode, buckets in categorized.items():
			for bucket in BUCKETS:
				for entry in buckets[bucket]:
					rows.append((mode, bucket, entry))
		self.table.setRowCount(len(rows))
		for row, (mode, bucket, entry) in enumerate(rows):
			cells = (mode.value, BUCKET_LABELS[bucket], entry.name, fmt_mmss(entry.duration))
			for col, text in enumerate(cells):
				item = QTableWidgetItem(text)
				item.setBackground(QColor(BUCKET_COLORS[bucket]))
				self.table.setItem(row, col, item)
		self._draw_chart(categorized)

	def _draw_chart(self, categorized):
		counts = bucket_counts(categorized)
		self.figure.clear()
		ax = self.figure.add_subplot(111)
		if not counts:
			ax.text(0.5, 0.5, "No sessions yet", ha='center', va='center', color=COLORS['text'])
			ax.set_axis_off()
			self.canvas.draw()
			return
		modes = [m.value for m in counts]
		bottom = [0] * len(modes)
		for bucket in BUCKETS:
			values = [c[bucket] for c in counts.values()]
			ax.bar(modes, values, bottom=bottom, label=BUCKET_LABELS[bucket],
			       color=BUCKET_BAR_COLORS[bucket], edgecolor='white', linewidth=1)
			bottom = [b + v for b, v in zip(bottom, values)]
		ax.set_ylabel("Sessions", fontsize=10, color=COLORS['text_strong'])
		ax.yaxis.set_major_locator(MaxNLocator(integer=True))
		ax.legend(fontsize=8, frameon=False, loc='upper right')
		for spine in ['top', 'right']:
			ax.spines[spine].set_visible(False)
		self.figure.tight_layout()
		self.canvas.draw()
