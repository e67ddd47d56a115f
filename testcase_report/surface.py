"""
Drawing surfaces.

Coordinates are points measured from the top-left corner of the page, the
way the layout engine tracks its cursor. The ReportLab surface flips them to
PDF space, where the origin is bottom-left.
"""

# Standard Library
import io
import json

# PIP3 modules
import reportlab.lib.utils
import reportlab.pdfbase.pdfmetrics
import reportlab.pdfgen.canvas

# local repo modules
import testcase_report as tcr
import testcase_report.config


ALIGN_LEFT = tcr.config.ALIGN_LEFT
DEFAULT_FONT_REGULAR = tcr.config.DEFAULT_FONT_REGULAR
COLOR_TEXT = tcr.config.COLOR_TEXT


#============================================
def parse_hex_color(value: str) -> tuple[float, float, float]:
	"""
	Parse a hex color string into RGB floats.

	Args:
		value: Color string like "#AABBCC".

	Returns:
		Tuple of (r, g, b) in 0.0-1.0 range.
	"""
	if not value or not value.startswith("#") or len(value) != 7:
		return (0.0, 0.0, 0.0)
	red = int(value[1:3], 16) / 255.0
	green = int(value[3:5], 16) / 255.0
	blue = int(value[5:7], 16) / 255.0
	return (red, green, blue)


#============================================
def compute_align_offset(available: float, used: float, align: str) -> float:
	"""
	Compute a horizontal alignment offset.

	Args:
		available: Available width.
		used: Width of the content.
		align: "left", "center" or "right".

	Returns:
		Offset in points.
	"""
	normalized = align.strip().lower()
	if normalized == "left":
		return 0.0
	if normalized == "right":
		return max(0.0, available - used)
	return max(0.0, (available - used) / 2.0)


#============================================
def wrap_text(text: str, font_name: str, font_size: float, width: float) -> list[str]:
	"""
	Wrap text to a width using real font metrics.

	Args:
		text: Text with optional newlines.
		font_name: ReportLab font name.
		font_size: Font size in points.
		width: Wrap width in points.

	Returns:
		Wrapped lines. Blank paragraphs are kept as empty lines.
	"""
	lines: list[str] = []
	for paragraph in text.splitlines():
		wrapped = reportlab.lib.utils.simpleSplit(paragraph, font_name, font_size, width)
		if not wrapped:
			lines.append("")
			continue
		for line in wrapped:
			if reportlab.pdfbase.pdfmetrics.stringWidth(line, font_name, font_size) <= width:
				lines.append(line)
			else:
				lines.extend(split_long_line(line, font_name, font_size, width))
	return lines


#============================================
def split_long_line(line: str, font_name: str, font_size: float, width: float) -> list[str]:
	"""
	Break a line with no usable spaces at character boundaries.

	Args:
		line: Line wider than the wrap width.
		font_name: ReportLab font name.
		font_size: Font size in points.
		width: Wrap width in points.

	Returns:
		Pieces no wider than width, except a single glyph wider than width.
	"""
	pieces: list[str] = []
	current = ""
	current_width = 0.0
	for char in line:
		char_width = reportlab.pdfbase.pdfmetrics.stringWidth(char, font_name, font_size)
		if current and current_width + char_width > width:
			pieces.append(current)
			current = ""
			current_width = 0.0
		current += char
		current_width += char_width
	if current:
		pieces.append(current)
	return pieces


class DrawingSurface:
	"""
	Drawing primitives the compositor issues against a page.
	"""

	def __init__(self, page_width: float, page_height: float):
		self.page_width = page_width
		self.page_height = page_height
		self.page = 1

	def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None:
		raise NotImplementedError

	def stroke_rect(
		self,
		x: float,
		y: float,
		width: float,
		height: float,
		color: str,
		line_width: float = 1.0,
	) -> None:
		raise NotImplementedError

	def stroke_line(
		self,
		x0: float,
		y0: float,
		x1: float,
		y1: float,
		color: str,
		line_width: float = 1.0,
	) -> None:
		raise NotImplementedError

	def draw_text(
		self,
		text: str,
		x: float,
		y: float,
		width: float,
		font_name: str = DEFAULT_FONT_REGULAR,
		font_size: float = 10.0,
		color: str = COLOR_TEXT,
		align: str = ALIGN_LEFT,
		leading: float | None = None,
		max_lines: int | None = None,
	) -> None:
		raise NotImplementedError

	def new_page(self) -> None:
		self.page += 1

	def finish(self) -> bytes:
		raise NotImplementedError


class ReportLabSurface(DrawingSurface):
	"""
	Surface backed by a ReportLab canvas writing into memory.
	"""

	def __init__(self, page_width: float, page_height: float, title: str | None = None):
		super().__init__(page_width, page_height)
		self.buffer = io.BytesIO()
		self.pdf = reportlab.pdfgen.canvas.Canvas(
			self.buffer,
			pagesize=(page_width, page_height),
			invariant=1,
		)
		if title:
			self.pdf.setTitle(title)

	def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None:
		red, green, blue = parse_hex_color(color)
		self.pdf.setFillColorRGB(red, green, blue)
		self.pdf.rect(x, self.page_height - y - height, width, height, stroke=0, fill=1)

	def stroke_rect(
		self,
		x: float,
		y: float,
		width: float,
		height: float,
		color: str,
		line_width: float = 1.0,
	) -> None:
		red, green, blue = parse_hex_color(color)
		self.pdf.setStrokeColorRGB(red, green, blue)
		self.pdf.setLineWidth(line_width)
		self.pdf.rect(x, self.page_height - y - height, width, height, stroke=1, fill=0)

	def stroke_line(
		self,
		x0: float,
		y0: float,
		x1: float,
		y1: float,
		color: str,
		line_width: float = 1.0,
	) -> None:
		red, green, blue = parse_hex_color(color)
		self.pdf.setStrokeColorRGB(red, green, blue)
		self.pdf.setLineWidth(line_width)
		self.pdf.line(x0, self.page_height - y0, x1, self.page_height - y1)

	def draw_text(
		self,
		text: str,
		x: float,
		y: float,
		width: float,
		font_name: str = DEFAULT_FONT_REGULAR,
		font_size: float = 10.0,
		color: str = COLOR_TEXT,
		align: str = ALIGN_LEFT,
		leading: float | None = None,
		max_lines: int | None = None,
	) -> None:
		if leading is None:
			leading = font_size * 1.2
		lines = wrap_text(text, font_name, font_size, width)
		if max_lines is not None:
			lines = lines[:max_lines]
		red, green, blue = parse_hex_color(color)
		self.pdf.setFillColorRGB(red, green, blue)
		self.pdf.setFont(font_name, font_size)
		ascent = reportlab.pdfbase.pdfmetrics.getAscent(font_name) * font_size / 1000.0
		for index, line in enumerate(lines):
			line_width = reportlab.pdfbase.pdfmetrics.stringWidth(line, font_name, font_size)
			text_x = x + compute_align_offset(width, line_width, align)
			baseline = y + ascent + index * leading
			self.pdf.drawString(text_x, self.page_height - baseline, line)

	def new_page(self) -> None:
		self.pdf.showPage()
		super().new_page()

	def finish(self) -> bytes:
		self.pdf.save()
		return self.buffer.getvalue()


class RecordingSurface(DrawingSurface):
	"""
	Surface that logs draw commands instead of rendering them.
	"""

	def __init__(self, page_width: float, page_height: float):
		super().__init__(page_width, page_height)
		self.commands: list[dict] = []
		self.finished = False

	def record(self, op: str, **fields) -> None:
		command = {"op": op, "page": self.page}
		command.update(fields)
		self.commands.append(command)

	def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None:
		self.record("fill_rect", x=x, y=y, width=width, height=height, color=color)

	def stroke_rect(
		self,
		x: float,
		y: float,
		width: float,
		height: float,
		color: str,
		line_width: float = 1.0,
	) -> None:
		self.record(
			"stroke_rect", x=x, y=y, width=width, height=height, color=color, line_width=line_width
		)

	def stroke_line(
		self,
		x0: float,
		y0: float,
		x1: float,
		y1: float,
		color: str,
		line_width: float = 1.0,
	) -> None:
		self.record("stroke_line", x0=x0, y0=y0, x1=x1, y1=y1, color=color, line_width=line_width)

	def draw_text(
		self,
		text: str,
		x: float,
		y: float,
		width: float,
		font_name: str = DEFAULT_FONT_REGULAR,
		font_size: float = 10.0,
		color: str = COLOR_TEXT,
		align: str = ALIGN_LEFT,
		leading: float | None = None,
		max_lines: int | None = None,
	) -> None:
		self.record(
			"draw_text",
			text=text,
			x=x,
			y=y,
			width=width,
			font_name=font_name,
			font_size=font_size,
			color=color,
			align=align,
			leading=leading,
			max_lines=max_lines,
		)

	def new_page(self) -> None:
		super().new_page()
		self.record("new_page")

	def finish(self) -> bytes:
		self.finished = True
		return json.dumps(self.commands).encode("utf-8")

	def texts(self, page: int | None = None) -> list[str]:
		"""
		Collect drawn text strings, optionally for one page.

		Args:
			page: Page number filter.

		Returns:
			Text strings in draw order.
		"""
		return [
			command["text"]
			for command in self.commands
			if command["op"] == "draw_text" and (page is None or command["page"] == page)
		]
