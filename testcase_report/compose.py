"""
Page composition: title page, table header, rows and footers.
"""

# Standard Library
import datetime

# local repo modules
import testcase_report as tcr
import testcase_report.config
import testcase_report.layout
import testcase_report.stats
import testcase_report.surface


Column = tcr.config.Column
RenderConfig = tcr.config.RenderConfig
ReportStats = tcr.stats.ReportStats
DrawingSurface = tcr.surface.DrawingSurface
LayoutPlan = tcr.layout.LayoutPlan
RowPlacement = tcr.layout.RowPlacement

DEFAULT_FONT_REGULAR = tcr.config.DEFAULT_FONT_REGULAR
DEFAULT_FONT_BOLD = tcr.config.DEFAULT_FONT_BOLD
ALIGN_LEFT = tcr.config.ALIGN_LEFT
ALIGN_CENTER = tcr.config.ALIGN_CENTER
ALIGN_RIGHT = tcr.config.ALIGN_RIGHT
CELL_TEXT_INSET = tcr.config.CELL_TEXT_INSET
TITLE_FONT_SIZE = tcr.config.TITLE_FONT_SIZE
HEADER_FONT_SIZE = tcr.config.HEADER_FONT_SIZE
BADGE_FONT_SIZE = tcr.config.BADGE_FONT_SIZE
BADGE_HEIGHT = tcr.config.BADGE_HEIGHT
FOOTER_FONT_SIZE = tcr.config.FOOTER_FONT_SIZE
FOOTER_OFFSET = tcr.config.FOOTER_OFFSET
FOOTER_RULE_GAP = tcr.config.FOOTER_RULE_GAP

TITLE_SUBTEXT = (
	"This document contains detailed test case specifications and requirements.",
	"Each test case includes ID, title, category, type, steps, test data, and expected results.",
)


#============================================
def format_timestamp(moment: datetime.datetime) -> str:
	"""
	Format a timestamp for the title page and footers.

	Args:
		moment: Time to format.

	Returns:
		Text like "03/14/2026, 09:26:53 AM".
	"""
	return moment.strftime("%m/%d/%Y, %I:%M:%S %p")


#============================================
def table_width(columns: list[Column] | tuple[Column, ...]) -> float:
	return sum(column.width for column in columns)


#============================================
def draw_title_page(
	surface: DrawingSurface,
	stats: ReportStats,
	config: RenderConfig,
	generated_at: datetime.datetime,
) -> None:
	"""
	Draw the title page with the summary counts.

	Args:
		surface: Drawing surface.
		stats: Aggregate counts.
		config: Render configuration.
		generated_at: Report generation time.
	"""
	left = config.margin
	width = config.table_width
	y = config.margin
	surface.draw_text(
		config.title,
		left,
		y,
		width,
		font_name=DEFAULT_FONT_BOLD,
		font_size=TITLE_FONT_SIZE,
		color=tcr.config.COLOR_TITLE,
		align=ALIGN_CENTER,
	)
	y += TITLE_FONT_SIZE * 1.2 + 16.0

	surface.stroke_line(
		left + 50.0,
		y,
		config.page_width - config.margin - 50.0,
		y,
		tcr.config.COLOR_ACCENT,
		line_width=2.0,
	)
	y += 24.0

	surface.draw_text(
		f"Report Generated: {format_timestamp(generated_at)}",
		left,
		y,
		width,
		font_size=11.0,
		color=tcr.config.COLOR_TITLE,
		align=ALIGN_CENTER,
	)
	y += 40.0

	for line in TITLE_SUBTEXT:
		surface.draw_text(line, left, y, width, font_size=10.0, color=tcr.config.COLOR_MUTED)
		y += 14.0
	y += 24.0

	surface.draw_text(
		"Summary",
		left,
		y,
		width,
		font_name=DEFAULT_FONT_BOLD,
		font_size=12.0,
		color=tcr.config.COLOR_TITLE,
	)
	y += 20.0
	summary_lines = [f"Total test cases: {stats.total}"]
	summary_lines.extend(f"{label}: {count}" for label, count in stats.by_type.items())
	summary_lines.extend(f"{label}: {count}" for label, count in stats.by_category.items())
	for line in summary_lines:
		surface.draw_text(line, left + 10.0, y, width - 10.0, font_size=10.0, color=tcr.config.COLOR_TITLE)
		y += 14.0


#============================================
def draw_table_header(
	surface: DrawingSurface,
	columns: list[Column] | tuple[Column, ...],
	y: float,
	height: float,
	config: RenderConfig,
) -> None:
	"""
	Draw the table header row.

	Args:
		surface: Drawing surface.
		columns: Column definitions.
		y: Top of the header.
		height: Header height.
		config: Render configuration.
	"""
	start_x = config.margin
	total_width = table_width(columns)
	surface.fill_rect(start_x, y, total_width, height, tcr.config.COLOR_HEADER_FILL)

	x = start_x
	for index, column in enumerate(columns):
		surface.draw_text(
			column.name,
			x + CELL_TEXT_INSET,
			y + 4.0,
			column.width - 2.0 * CELL_TEXT_INSET,
			font_name=DEFAULT_FONT_BOLD,
			font_size=HEADER_FONT_SIZE,
			align=column.alignment,
			max_lines=2,
		)
		if index < len(columns) - 1:
			surface.stroke_line(
				x + column.width,
				y,
				x + column.width,
				y + height,
				tcr.config.COLOR_HEADER_SEPARATOR,
				line_width=0.5,
			)
		x += column.width

	surface.stroke_rect(start_x, y, total_width, height, tcr.config.COLOR_TEXT, line_width=1.5)


#============================================
def draw_badge(
	surface: DrawingSurface,
	label: str,
	x: float,
	y: float,
	width: float,
	config: RenderConfig,
) -> None:
	"""
	Draw a colored classification badge centered in its cell.

	The label is limited to one line so it stays inside the badge.

	Args:
		surface: Drawing surface.
		label: Sanitized classification label.
		x: Cell left edge.
		y: Row top.
		width: Cell width.
		config: Render configuration.
	"""
	colors = tcr.config.badge_colors_for(label, config)
	inner_x = x + CELL_TEXT_INSET
	inner_width = width - 2.0 * CELL_TEXT_INSET
	surface.fill_rect(inner_x - 2.0, y + 5.0, inner_width + 4.0, BADGE_HEIGHT, colors.background)
	surface.draw_text(
		label,
		inner_x,
		y + 6.0,
		inner_width,
		font_name=DEFAULT_FONT_BOLD,
		font_size=BADGE_FONT_SIZE,
		color=colors.foreground,
		align=ALIGN_CENTER,
		leading=config.line_height,
		max_lines=1,
	)


#============================================
def draw_table_row(
	surface: DrawingSurface,
	row: RowPlacement,
	columns: list[Column] | tuple[Column, ...],
	config: RenderConfig,
) -> None:
	"""
	Draw one data row.

	Args:
		surface: Drawing surface.
		row: Row placement from the layout plan.
		columns: Column definitions.
		config: Render configuration.
	"""
	start_x = config.margin
	total_width = table_width(columns)
	background = tcr.config.COLOR_ROW_TINT if row.shaded else tcr.config.COLOR_ROW_PLAIN
	surface.fill_rect(start_x, row.y, total_width, row.height, background)

	x = start_x
	for index, (column, cell) in enumerate(zip(columns, row.cells)):
		if column.name == config.classification_column:
			draw_badge(surface, cell, x, row.y, column.width, config)
		else:
			surface.draw_text(
				cell,
				x + CELL_TEXT_INSET,
				row.y + 5.0,
				column.width - 2.0 * CELL_TEXT_INSET,
				font_size=config.font_size,
				align=column.alignment,
				leading=config.line_height,
				max_lines=row.max_lines,
			)
		if index < len(columns) - 1:
			surface.stroke_line(
				x + column.width,
				row.y,
				x + column.width,
				row.bottom,
				tcr.config.COLOR_CELL_SEPARATOR,
				line_width=0.5,
			)
		x += column.width

	surface.stroke_rect(start_x, row.y, total_width, row.height, tcr.config.COLOR_TEXT, line_width=1.0)


#============================================
def draw_page_footer(
	surface: DrawingSurface,
	page: int,
	stats: ReportStats,
	config: RenderConfig,
	generated_at: datetime.datetime,
) -> None:
	"""
	Draw the footer rule, page number, case total and timestamp.

	Args:
		surface: Drawing surface.
		page: Page number being closed.
		stats: Aggregate counts.
		config: Render configuration.
		generated_at: Report generation time.
	"""
	footer_y = config.page_height - config.margin - FOOTER_OFFSET
	surface.stroke_line(
		config.margin,
		footer_y - FOOTER_RULE_GAP,
		config.page_width - config.margin,
		footer_y - FOOTER_RULE_GAP,
		tcr.config.COLOR_FOOTER_RULE,
		line_width=0.5,
	)
	half_width = config.page_width / 2.0 - config.margin
	muted = tcr.config.COLOR_MUTED
	surface.draw_text(
		f"Page {page} of Test Cases",
		config.margin,
		footer_y,
		half_width,
		font_size=FOOTER_FONT_SIZE,
		color=muted,
		align=ALIGN_LEFT,
	)
	surface.draw_text(
		f"{stats.total} test cases",
		config.margin,
		footer_y,
		config.table_width,
		font_size=FOOTER_FONT_SIZE,
		color=muted,
		align=ALIGN_CENTER,
	)
	surface.draw_text(
		format_timestamp(generated_at),
		config.page_width / 2.0,
		footer_y,
		half_width,
		font_size=FOOTER_FONT_SIZE,
		color=muted,
		align=ALIGN_RIGHT,
	)


#============================================
def compose_document(
	surface: DrawingSurface,
	plan: LayoutPlan,
	columns: list[Column] | tuple[Column, ...],
	stats: ReportStats,
	config: RenderConfig,
	generated_at: datetime.datetime,
) -> None:
	"""
	Replay a layout plan onto a drawing surface.

	Args:
		surface: Drawing surface.
		plan: Layout plan.
		columns: Column definitions.
		stats: Aggregate counts.
		config: Render configuration.
		generated_at: Report generation time.
	"""
	for event in plan.events:
		if isinstance(event, tcr.layout.TitlePlacement):
			draw_title_page(surface, stats, config, generated_at)
		elif isinstance(event, tcr.layout.PageStart):
			surface.new_page()
		elif isinstance(event, tcr.layout.HeaderPlacement):
			draw_table_header(surface, columns, event.y, event.height, config)
		elif isinstance(event, RowPlacement):
			draw_table_row(surface, event, columns, config)
		elif isinstance(event, tcr.layout.FooterPlacement):
			draw_page_footer(surface, event.page, stats, config, generated_at)
