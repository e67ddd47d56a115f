import pytest

import testcase_report.config
import testcase_report.render
import testcase_report.surface


CONFIG = testcase_report.config.RenderConfig()


#============================================
def render_recorded(records, fixed_time, config=None) -> tuple:
	"""
	Render into a RecordingSurface.

	Args:
		records: TestCase list.
		fixed_time: Report timestamp.
		config: Optional RenderConfig.

	Returns:
		Tuple of (RenderResult, RecordingSurface).
	"""
	config = config or CONFIG
	surface = testcase_report.surface.RecordingSurface(config.page_width, config.page_height)
	result = testcase_report.render.render_report(
		records,
		config=config,
		surface=surface,
		generated_at=fixed_time,
	)
	return result, surface


#============================================
def header_pages(surface) -> list[int]:
	return [
		command["page"]
		for command in surface.commands
		if command["op"] == "fill_rect" and command["color"] == testcase_report.config.COLOR_HEADER_FILL
	]


#============================================
def footer_texts(surface) -> list[tuple[int, str]]:
	return [
		(command["page"], command["text"])
		for command in surface.commands
		if command["op"] == "draw_text" and command["text"].startswith("Page ")
	]


#============================================
def row_fills(surface) -> list[str]:
	shading = (testcase_report.config.COLOR_ROW_TINT, testcase_report.config.COLOR_ROW_PLAIN)
	return [
		command["color"]
		for command in surface.commands
		if command["op"] == "fill_rect" and command["color"] in shading
	]


#============================================
def test_empty_document(fixed_time) -> None:
	result, surface = render_recorded([], fixed_time)
	assert surface.finished
	assert result.pages == 2
	assert result.rows == 0
	assert result.stats.total == 0
	assert header_pages(surface) == [2]
	assert footer_texts(surface) == [(2, "Page 2 of Test Cases")]
	assert "Total test cases: 0" in surface.texts(page=1)
	assert "Test Cases Report" in surface.texts(page=1)


#============================================
def test_title_page_shows_stats(make_case, fixed_time) -> None:
	records = [make_case(1, type="Security"), make_case(2, category="Edge")]
	_result, surface = render_recorded(records, fixed_time)
	title_texts = surface.texts(page=1)
	assert "Total test cases: 2" in title_texts
	assert "Security: 1" in title_texts
	assert "Edge: 1" in title_texts
	assert "Report Generated: 03/14/2026, 09:26:53 AM" in title_texts


#============================================
def test_alternating_shading_starts_tinted(make_case, fixed_time) -> None:
	records = [make_case(index) for index in range(3)]
	result, surface = render_recorded(records, fixed_time)
	assert result.table_pages == 1
	assert row_fills(surface) == [
		testcase_report.config.COLOR_ROW_TINT,
		testcase_report.config.COLOR_ROW_PLAIN,
		testcase_report.config.COLOR_ROW_TINT,
	]
	page_texts = surface.texts(page=2)
	ids = [text for text in page_texts if text.startswith("TC-")]
	assert ids == ["TC-000", "TC-001", "TC-002"]


#============================================
def test_one_header_and_footer_per_page(make_case, fixed_time) -> None:
	"""
	Every table page gets exactly one header and one footer.
	"""
	records = [make_case(index, steps=("step " * (index % 5 * 20),)) for index in range(80)]
	result, surface = render_recorded(records, fixed_time)
	table_pages = list(range(2, result.pages + 1))
	assert result.table_pages == len(table_pages)
	assert header_pages(surface) == table_pages
	assert footer_texts(surface) == [(page, f"Page {page} of Test Cases") for page in table_pages]
	page_breaks = [command for command in surface.commands if command["op"] == "new_page"]
	assert len(page_breaks) == result.pages - 1


#============================================
def test_footer_before_break_has_page_number(make_case, fixed_time) -> None:
	records = [make_case(index) for index in range(25)]
	result, surface = render_recorded(records, fixed_time)
	assert result.table_pages == 2
	ops = [(command["op"], command.get("text")) for command in surface.commands]
	break_index = ops.index(("new_page", None), ops.index(("new_page", None)) + 1)
	before_break = [text for op, text in ops[:break_index] if op == "draw_text"]
	assert before_break[-3:] == ["Page 2 of Test Cases", "25 test cases", "03/14/2026, 09:26:53 AM"]
	after_break = [text for op, text in ops[break_index:] if op == "draw_text"]
	assert after_break[0] == "ID"
	assert "TC-024" in after_break


#============================================
def test_known_badge_colors(make_case, fixed_time) -> None:
	_result, surface = render_recorded([make_case(1, type="Performance")], fixed_time)
	expected = testcase_report.config.BADGE_COLORS["Performance"]
	fills = [command["color"] for command in surface.commands if command["op"] == "fill_rect"]
	assert expected.background in fills
	badge_text = [
		command for command in surface.commands
		if command["op"] == "draw_text" and command["text"] == "Performance" and command["page"] == 2
	]
	assert len(badge_text) == 1
	assert badge_text[0]["color"] == expected.foreground
	assert badge_text[0]["align"] == "center"


#============================================
def test_unknown_badge_uses_neutral_colors(make_case, fixed_time) -> None:
	_result, surface = render_recorded([make_case(1, type="Exploratory")], fixed_time)
	neutral = testcase_report.config.DEFAULT_BADGE_COLORS
	fills = [command["color"] for command in surface.commands if command["op"] == "fill_rect"]
	assert neutral.background in fills
	badge_text = [
		command for command in surface.commands
		if command["op"] == "draw_text" and command["text"] == "Exploratory"
	]
	assert badge_text[0]["color"] == neutral.foreground


#============================================
def test_badge_overrides_column_alignment(make_case, fixed_time) -> None:
	"""
	The classification badge is centered even when its column is left aligned.
	"""
	columns = list(testcase_report.config.DEFAULT_COLUMNS)
	columns[3] = testcase_report.config.Column("Type", columns[3].width, "left")
	surface = testcase_report.surface.RecordingSurface(CONFIG.page_width, CONFIG.page_height)
	testcase_report.render.render_report(
		[make_case(1, type="Regression")],
		columns=columns,
		surface=surface,
		generated_at=fixed_time,
	)
	badge_text = [
		command for command in surface.commands
		if command["op"] == "draw_text" and command["text"] == "Regression" and command["page"] == 2
	]
	assert badge_text[0]["align"] == "center"


#============================================
def test_long_cell_clipped_to_row(make_case, fixed_time) -> None:
	steps = ("s" * 2000,)
	_result, surface = render_recorded([make_case(1, steps=steps)], fixed_time)
	step_text = [
		command for command in surface.commands
		if command["op"] == "draw_text" and command["text"] == "s" * 2000
	]
	assert len(step_text) == 1
	command = step_text[0]
	assert command["max_lines"] == 10
	assert command["y"] + command["max_lines"] * command["leading"] <= CONFIG.rows_top + CONFIG.max_row_height


#============================================
def test_drawn_text_matches_measured_text(make_case, fixed_time) -> None:
	record = make_case(1, title="  Needs\ttrim\x07  ", test_data="")
	_result, surface = render_recorded([record], fixed_time)
	page_texts = surface.texts(page=2)
	assert "Needs trim" in page_texts
	assert "  Needs\ttrim\x07  " not in page_texts
	assert "-" in page_texts


#============================================
class FailingSurface(testcase_report.surface.RecordingSurface):
	"""
	Recording surface whose text drawing fails after a number of calls.
	"""

	def __init__(self, page_width: float, page_height: float, fail_after: int):
		super().__init__(page_width, page_height)
		self.fail_after = fail_after
		self.text_calls = 0

	def draw_text(self, text: str, *args, **kwargs) -> None:
		self.text_calls += 1
		if self.text_calls > self.fail_after:
			raise MemoryError("buffer exhausted")
		super().draw_text(text, *args, **kwargs)


#============================================
def test_surface_failure_aborts_render(make_case, fixed_time) -> None:
	records = [make_case(index) for index in range(30)]
	surface = FailingSurface(CONFIG.page_width, CONFIG.page_height, fail_after=40)
	outcome = None
	with pytest.raises(MemoryError, match="buffer exhausted"):
		outcome = testcase_report.render.render_report(records, surface=surface, generated_at=fixed_time)
	assert outcome is None
	assert not surface.finished
	assert surface.text_calls == 41


#============================================
def test_badge_label_single_line(make_case, fixed_time) -> None:
	"""
	Badge text stays on one line even in a tall row.
	"""
	record = make_case(1, type="Extended compatibility regression", steps=("s" * 2000,))
	_result, surface = render_recorded([record], fixed_time)
	badge_text = [
		command for command in surface.commands
		if command["op"] == "draw_text" and command["text"] == "Extended compatibility regression"
		and command["page"] == 2
	]
	assert len(badge_text) == 1
	assert badge_text[0]["max_lines"] == 1
