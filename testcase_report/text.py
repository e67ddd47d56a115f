"""
Cell text sanitizing shared by measurement and drawing.
"""

# Standard Library
import re

# local repo modules
import testcase_report as tcr
import testcase_report.config


PLACEHOLDER_TEXT = tcr.config.PLACEHOLDER_TEXT

# control characters other than \n and \r, plus DEL
CONTROL_CHARS = re.compile(r"[\x00-\x09\x0B\x0C\x0E-\x1F\x7F]")


#============================================
def sanitize_text(text: str | None) -> str:
	"""
	Clean cell text before it is measured or drawn.

	Args:
		text: Raw cell value.

	Returns:
		Printable text, or the placeholder dash when nothing is left.
	"""
	if not text:
		return PLACEHOLDER_TEXT
	cleaned = text.replace("\t", " ")
	cleaned = CONTROL_CHARS.sub("", cleaned)
	cleaned = cleaned.strip()
	if not cleaned:
		return PLACEHOLDER_TEXT
	return cleaned


#============================================
def sanitize_row(cells: list[str] | tuple[str, ...]) -> tuple[str, ...]:
	"""
	Sanitize every cell of a row.

	Args:
		cells: Raw cell values in column order.

	Returns:
		Tuple of sanitized cell strings.
	"""
	return tuple(sanitize_text(cell) for cell in cells)
