import io

import pypdf
import pytest
import reportlab.pdfbase.pdfmetrics

import testcase_report.config
import testcase_report.render
import testcase_report.surface


FONT = testcase_report.config.DEFAULT_FONT_REGULAR
SIZE = testcase_report.config.CELL_FONT_SIZE


#============================================
def line_width(line: str) -> float:
	return reportlab.pdfbase.pdfmetrics.stringWidth(line, FONT, SIZE)


#============================================
@pytest.mark.parametrize(
	"text",
	[
		"s" * 2000,
		"https://example.com/api/v1/" + "token" * 60,
		"Use token " + "QUJDREVGR0hJSktMTU5PUFFSU1RVVldYWVo=" * 8 + " then submit",
		"short words only wrap at spaces as usual",
	],
)
def test_wrapped_lines_fit_cell(text: str) -> None:
	"""
	No wrapped line is wider than the wrap width, and no text is lost.
	"""
	width = 98.0
	lines = testcase_report.surface.wrap_text(text, FONT, SIZE, width)
	assert lines
	for line in lines:
		assert line_width(line) <= width
	assert "".join(lines).replace(" ", "") == text.replace(" ", "")


#============================================
def test_long_word_split_at_characters() -> None:
	pieces = testcase_report.surface.split_long_line("x" * 300, FONT, SIZE, 50.0)
	assert len(pieces) > 1
	assert "".join(pieces) == "x" * 300
	assert all(line_width(piece) <= 50.0 for piece in pieces)


#============================================
def test_blank_paragraphs_kept() -> None:
	lines = testcase_report.surface.wrap_text("one\n\ntwo", FONT, SIZE, 98.0)
	assert lines == ["one", "", "two"]


#============================================
def test_unbroken_cell_renders_inside_pdf(make_case, fixed_time) -> None:
	"""
	A long unbroken test data value renders and its first piece is on the table page.
	"""
	token = "A1b2C3d4" * 150
	record = make_case(1, test_data=token)
	result = testcase_report.render.render_report([record], generated_at=fixed_time)
	reader = pypdf.PdfReader(io.BytesIO(result.data))
	assert len(reader.pages) == 2
	assert "A1b2C3d4" in reader.pages[1].extract_text()
