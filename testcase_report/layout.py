"""
Row sizing and pagination.

The layout engine walks the rows once, top to bottom, and emits placement
events for the compositor. It never draws anything itself, so pagination can
be checked without a PDF backend.

Document flow:
	title page -> table page (header) -> rows ... -> footer
	whenever the next row would cross the content bottom, the current page
	gets its footer and a new table page with a fresh header is opened.
"""

# Standard Library
import dataclasses
import math

# local repo modules
import testcase_report as tcr
import testcase_report.config
import testcase_report.text


Column = tcr.config.Column
RenderConfig = tcr.config.RenderConfig
sanitize_text = tcr.text.sanitize_text
sanitize_row = tcr.text.sanitize_row


@dataclasses.dataclass
class Cursor:
	page: int = 1
	y: float = 0.0
	content_height: float = 0.0

	def start_page(self, top: float) -> None:
		self.page += 1
		self.y = top
		self.content_height = 0.0

	def advance(self, height: float) -> None:
		self.y += height
		self.content_height += height


@dataclasses.dataclass(frozen=True)
class TitlePlacement:
	page: int


@dataclasses.dataclass(frozen=True)
class PageStart:
	page: int


@dataclasses.dataclass(frozen=True)
class HeaderPlacement:
	page: int
	y: float
	height: float


@dataclasses.dataclass(frozen=True)
class RowPlacement:
	index: int
	page: int
	y: float
	height: float
	cells: tuple[str, ...]
	shaded: bool
	max_lines: int

	@property
	def bottom(self) -> float:
		return self.y + self.height


@dataclasses.dataclass(frozen=True)
class FooterPlacement:
	page: int


LayoutEvent = TitlePlacement | PageStart | HeaderPlacement | RowPlacement | FooterPlacement


@dataclasses.dataclass
class LayoutPlan:
	events: list[LayoutEvent]
	pages: int

	@property
	def rows(self) -> list[RowPlacement]:
		return [event for event in self.events if isinstance(event, RowPlacement)]

	@property
	def headers(self) -> list[HeaderPlacement]:
		return [event for event in self.events if isinstance(event, HeaderPlacement)]

	@property
	def footers(self) -> list[FooterPlacement]:
		return [event for event in self.events if isinstance(event, FooterPlacement)]

	@property
	def table_pages(self) -> int:
		return len(self.headers)


#============================================
def estimate_cell_lines(text: str, width: float, config: RenderConfig) -> int:
	"""
	Estimate wrapped line count from an average character width.

	Args:
		text: Sanitized cell text.
		width: Column width in points.
		config: Render configuration.

	Returns:
		Line count, at least 1.
	"""
	usable = width - config.inner_padding
	lines = math.ceil(len(text) * config.avg_char_width / usable)
	return max(1, lines)


#============================================
def estimate_row_height(
	cells: list[str] | tuple[str, ...],
	widths: list[float],
	config: RenderConfig,
) -> float:
	"""
	Estimate the height of a table row.

	Args:
		cells: Cell texts in column order.
		widths: Column widths in points.
		config: Render configuration.

	Returns:
		Row height clamped to [min_row_height, max_row_height].
	"""
	tallest = config.min_row_height
	for text, width in zip(cells, widths):
		lines = estimate_cell_lines(sanitize_text(text), width, config)
		cell_height = lines * config.line_height + config.vertical_padding
		tallest = max(tallest, cell_height)
	return min(tallest, config.max_row_height)


#============================================
def max_visible_lines(height: float, config: RenderConfig) -> int:
	"""
	Number of text lines that fit in a row of the given height.

	Args:
		height: Row height in points.
		config: Render configuration.

	Returns:
		Line count, at least 1.
	"""
	usable = height - config.vertical_padding
	return max(1, int(usable // config.line_height))


#============================================
def should_break_page(cursor_y: float, row_height: float, content_bottom: float) -> bool:
	"""
	Check whether a row starting at cursor_y would cross the content bottom.

	Args:
		cursor_y: Current offset from the page top.
		row_height: Height of the next row.
		content_bottom: Lowest offset rows may reach.

	Returns:
		True if the row belongs on a new page.
	"""
	return cursor_y + row_height > content_bottom


#============================================
def open_table_page(cursor: Cursor, events: list[LayoutEvent], config: RenderConfig) -> None:
	"""
	Start a new page and place the table header at its top.

	Args:
		cursor: Layout cursor, moved to the first row slot.
		events: Event list to extend.
		config: Render configuration.
	"""
	cursor.start_page(config.content_top)
	events.append(PageStart(page=cursor.page))
	events.append(HeaderPlacement(page=cursor.page, y=cursor.y, height=config.header_height))
	cursor.advance(config.header_height + config.header_gap)


#============================================
def plan_layout(
	rows: list[tuple[str, ...]],
	columns: list[Column] | tuple[Column, ...],
	config: RenderConfig,
) -> LayoutPlan:
	"""
	Lay out all rows across pages.

	Args:
		rows: Raw row cells in column order.
		columns: Column definitions.
		config: Render configuration.

	Returns:
		LayoutPlan with ordered placement events.
	"""
	tcr.config.validate_config(config)
	widths = [column.width for column in columns]
	cursor = Cursor(page=1, y=config.content_top)
	events: list[LayoutEvent] = [TitlePlacement(page=cursor.page)]
	open_table_page(cursor, events, config)

	for index, row in enumerate(rows):
		cells = sanitize_row(row)
		height = estimate_row_height(cells, widths, config)
		if should_break_page(cursor.y, height, config.content_bottom):
			events.append(FooterPlacement(page=cursor.page))
			open_table_page(cursor, events, config)
		events.append(
			RowPlacement(
				index=index,
				page=cursor.page,
				y=cursor.y,
				height=height,
				cells=cells,
				shaded=index % 2 == 0,
				max_lines=max_visible_lines(height, config),
			)
		)
		cursor.advance(height)

	events.append(FooterPlacement(page=cursor.page))
	return LayoutPlan(events=events, pages=cursor.page)
