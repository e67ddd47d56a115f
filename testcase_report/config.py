"""
Shared configuration and constants.
"""

import dataclasses

# PIP3 modules
import reportlab.lib.pagesizes


PAGE_WIDTH, PAGE_HEIGHT = reportlab.lib.pagesizes.letter
PAGE_MARGIN = 30.0
FOOTER_RESERVE = 80.0
FOOTER_OFFSET = 15.0
FOOTER_RULE_GAP = 10.0

HEADER_HEIGHT = 32.0
HEADER_GAP = 6.0

CELL_FONT_SIZE = 8.5
CELL_CHAR_WIDTH_FACTOR = 0.45
CELL_INNER_PADDING = 10.0
CELL_LINE_HEIGHT = 11.0
CELL_VERTICAL_PADDING = 8.0
CELL_TEXT_INSET = 5.0
MIN_ROW_HEIGHT = 25.0
MAX_ROW_HEIGHT = 120.0

HEADER_FONT_SIZE = 11.0
BADGE_FONT_SIZE = 7.5
BADGE_HEIGHT = 14.0
FOOTER_FONT_SIZE = 8.0
TITLE_FONT_SIZE = 32.0

DEFAULT_FONT_REGULAR = "Helvetica"
DEFAULT_FONT_BOLD = "Helvetica-Bold"

COLOR_TEXT = "#000000"
COLOR_TITLE = "#2C3E50"
COLOR_ACCENT = "#3498DB"
COLOR_MUTED = "#888888"
COLOR_HEADER_FILL = "#E8E8E8"
COLOR_HEADER_SEPARATOR = "#CCCCCC"
COLOR_ROW_TINT = "#F8F9FA"
COLOR_ROW_PLAIN = "#FFFFFF"
COLOR_CELL_SEPARATOR = "#DDDDDD"
COLOR_FOOTER_RULE = "#DDDDDD"

PLACEHOLDER_TEXT = "-"
REPORT_TITLE = "Test Cases Report"
PDF_CONTENT_TYPE = "application/pdf"
PDF_FILENAME = "test-cases.pdf"

CLASSIFICATION_COLUMN = "Type"
CLASSIFICATION_LABELS = ("Sanity", "Regression", "Performance", "Security")
CATEGORY_LABELS = ("Positive", "Negative", "Edge", "Authorization", "Non-Functional")

ALIGN_LEFT = "left"
ALIGN_CENTER = "center"
ALIGN_RIGHT = "right"
COLUMN_ALIGNMENTS = (ALIGN_LEFT, ALIGN_CENTER)


#============================================
class ConfigError(ValueError):
	"""
	Raised when the column spec or render config cannot produce a document.
	"""


@dataclasses.dataclass(frozen=True)
class BadgeColors:
	background: str
	foreground: str


BADGE_COLORS = {
	"Sanity": BadgeColors(background="#D5F4E6", foreground="#186A3B"),
	"Regression": BadgeColors(background="#D6EAF8", foreground="#1B4965"),
	"Performance": BadgeColors(background="#FDEBD0", foreground="#7D3C0A"),
	"Security": BadgeColors(background="#FADBD8", foreground="#78281F"),
}
DEFAULT_BADGE_COLORS = BadgeColors(background="#ECECEC", foreground="#333333")


@dataclasses.dataclass(frozen=True)
class Column:
	name: str
	width: float
	alignment: str = ALIGN_LEFT


DEFAULT_COLUMNS = (
	Column("ID", 36.0, ALIGN_CENTER),
	Column("Title", 84.0, ALIGN_LEFT),
	Column("Category", 60.0, ALIGN_LEFT),
	Column("Type", 72.0, ALIGN_CENTER),
	Column("Steps", 108.0, ALIGN_LEFT),
	Column("Test Data", 96.0, ALIGN_LEFT),
	Column("Expected Result", 96.0, ALIGN_LEFT),
)


@dataclasses.dataclass
class RenderConfig:
	page_width: float = PAGE_WIDTH
	page_height: float = PAGE_HEIGHT
	margin: float = PAGE_MARGIN
	footer_reserve: float = FOOTER_RESERVE
	header_height: float = HEADER_HEIGHT
	header_gap: float = HEADER_GAP
	font_size: float = CELL_FONT_SIZE
	char_width_factor: float = CELL_CHAR_WIDTH_FACTOR
	inner_padding: float = CELL_INNER_PADDING
	line_height: float = CELL_LINE_HEIGHT
	vertical_padding: float = CELL_VERTICAL_PADDING
	min_row_height: float = MIN_ROW_HEIGHT
	max_row_height: float = MAX_ROW_HEIGHT
	classification_column: str = CLASSIFICATION_COLUMN
	badge_colors: dict[str, BadgeColors] = dataclasses.field(
		default_factory=lambda: dict(BADGE_COLORS)
	)
	default_badge_colors: BadgeColors = DEFAULT_BADGE_COLORS
	title: str = REPORT_TITLE

	@property
	def avg_char_width(self) -> float:
		return self.font_size * self.char_width_factor

	@property
	def content_top(self) -> float:
		return self.margin

	@property
	def content_bottom(self) -> float:
		return self.page_height - self.margin - self.footer_reserve

	@property
	def rows_top(self) -> float:
		return self.content_top + self.header_height + self.header_gap

	@property
	def table_width(self) -> float:
		return self.page_width - 2.0 * self.margin


#============================================
def build_config(**overrides) -> RenderConfig:
	"""
	Build a render config from defaults plus keyword overrides.

	Args:
		**overrides: RenderConfig field values to replace.

	Returns:
		Validated RenderConfig.
	"""
	config = RenderConfig(**overrides)
	validate_config(config)
	return config


#============================================
def validate_config(config: RenderConfig) -> None:
	"""
	Check that a config can lay out at least one maximum-height row per page.

	Args:
		config: Render configuration.
	"""
	if config.min_row_height <= 0.0:
		raise ConfigError(f"min_row_height must be positive, got {config.min_row_height}")
	if config.max_row_height < config.min_row_height:
		raise ConfigError(
			f"max_row_height {config.max_row_height} is below min_row_height {config.min_row_height}"
		)
	if config.line_height <= 0.0:
		raise ConfigError(f"line_height must be positive, got {config.line_height}")
	available = config.content_bottom - config.rows_top
	if config.max_row_height > available:
		raise ConfigError(
			f"max_row_height {config.max_row_height} does not fit the content region ({available:.1f} pt)"
		)


#============================================
def validate_columns(columns: list[Column] | tuple[Column, ...], field_count: int, config: RenderConfig) -> None:
	"""
	Check a column spec against the record projection and the page.

	Args:
		columns: Column definitions.
		field_count: Number of fields in a record projection.
		config: Render configuration.
	"""
	if len(columns) != field_count:
		raise ConfigError(
			f"column spec has {len(columns)} columns but records project {field_count} fields"
		)
	for column in columns:
		if column.width <= config.inner_padding:
			raise ConfigError(
				f"column {column.name!r} width {column.width} must exceed the cell padding {config.inner_padding}"
			)
		if column.alignment not in COLUMN_ALIGNMENTS:
			raise ConfigError(
				f"column {column.name!r} alignment {column.alignment!r} is not one of {COLUMN_ALIGNMENTS}"
			)
	total_width = sum(column.width for column in columns)
	if total_width > config.table_width + 0.001:
		raise ConfigError(
			f"column widths total {total_width:.1f} pt, wider than the table ({config.table_width:.1f} pt)"
		)


#============================================
def scale_columns(columns: list[Column] | tuple[Column, ...], total_width: float) -> tuple[Column, ...]:
	"""
	Scale column widths proportionally to fill a table width.

	Args:
		columns: Column definitions.
		total_width: Target table width in points.

	Returns:
		Columns with the same names and alignments and rescaled widths.
	"""
	current = sum(column.width for column in columns)
	factor = total_width / current
	return tuple(
		dataclasses.replace(column, width=column.width * factor)
		for column in columns
	)


#============================================
def badge_colors_for(label: str, config: RenderConfig) -> BadgeColors:
	"""
	Look up badge colors for a classification label.

	Args:
		label: Classification label as drawn.
		config: Render configuration.

	Returns:
		BadgeColors, the neutral default for unknown labels.
	"""
	return config.badge_colors.get(label, config.default_badge_colors)
