"""
Render test cases into a paginated PDF report.
"""

# Standard Library
import dataclasses
import datetime

# local repo modules
import testcase_report as tcr
import testcase_report.compose
import testcase_report.config
import testcase_report.layout
import testcase_report.records
import testcase_report.stats
import testcase_report.surface


Column = tcr.config.Column
RenderConfig = tcr.config.RenderConfig
TestCase = tcr.records.TestCase
ReportStats = tcr.stats.ReportStats
DrawingSurface = tcr.surface.DrawingSurface

DEFAULT_COLUMNS = tcr.config.DEFAULT_COLUMNS
RECORD_FIELDS = tcr.records.RECORD_FIELDS


@dataclasses.dataclass
class RenderResult:
	data: bytes
	pages: int
	table_pages: int
	rows: int
	stats: ReportStats


#============================================
def render_report(
	records: list[TestCase],
	columns: list[Column] | tuple[Column, ...] | None = None,
	config: RenderConfig | None = None,
	surface: DrawingSurface | None = None,
	generated_at: datetime.datetime | None = None,
) -> RenderResult:
	"""
	Render test cases as a titled, paginated table.

	Column and config problems raise ConfigError before anything is drawn.

	Args:
		records: Test cases in report order.
		columns: Column definitions, DEFAULT_COLUMNS scaled to the table width when omitted.
		config: Render configuration, defaults when omitted.
		surface: Drawing surface, a new ReportLabSurface when omitted.
		generated_at: Timestamp printed on the report, now when omitted.

	Returns:
		RenderResult with the finished document bytes.
	"""
	if config is None:
		config = RenderConfig()
	if columns is None:
		columns = tcr.config.scale_columns(DEFAULT_COLUMNS, config.table_width)
	if generated_at is None:
		generated_at = datetime.datetime.now()
	tcr.config.validate_config(config)
	tcr.config.validate_columns(columns, len(RECORD_FIELDS), config)

	stats = tcr.stats.compute_stats(records)
	rows = [record.to_row() for record in records]
	plan = tcr.layout.plan_layout(rows, columns, config)

	if surface is None:
		surface = tcr.surface.ReportLabSurface(config.page_width, config.page_height, title=config.title)
	tcr.compose.compose_document(surface, plan, columns, stats, config, generated_at)
	data = surface.finish()

	return RenderResult(
		data=data,
		pages=plan.pages,
		table_pages=plan.table_pages,
		rows=len(plan.rows),
		stats=stats,
	)


#============================================
def convert_to_pdf(records: list[TestCase]) -> bytes:
	"""
	Render test cases to PDF bytes with default columns and config.

	Args:
		records: Test cases in report order.

	Returns:
		PDF document bytes.
	"""
	return render_report(records).data
