"""
CSV and Excel exports of the same test case rows.
"""

# Standard Library
import csv
import io

# PIP3 modules
import openpyxl
import openpyxl.utils

# local repo modules
import testcase_report as tcr
import testcase_report.records


TestCase = tcr.records.TestCase
RECORD_FIELDS = tcr.records.RECORD_FIELDS

SHEET_TITLE = "Test Cases"
XLSX_COLUMN_WIDTHS = (10, 30, 15, 15, 40, 30, 40)
CSV_CONTENT_TYPE = "text/csv"
XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


#============================================
def convert_to_csv(records: list[TestCase]) -> str:
	"""
	Convert test cases to CSV text.

	Args:
		records: Test cases in report order.

	Returns:
		CSV text with a header row, or an empty string for no records.
	"""
	if not records:
		return ""
	buffer = io.StringIO()
	writer = csv.writer(buffer, lineterminator="\n")
	writer.writerow(RECORD_FIELDS)
	for record in records:
		writer.writerow(record.to_row())
	return buffer.getvalue()


#============================================
def convert_to_xlsx(records: list[TestCase]) -> bytes:
	"""
	Convert test cases to an Excel workbook.

	Args:
		records: Test cases in report order.

	Returns:
		XLSX file bytes with a single "Test Cases" sheet.
	"""
	workbook = openpyxl.Workbook()
	sheet = workbook.active
	sheet.title = SHEET_TITLE
	sheet.append(list(RECORD_FIELDS))
	for record in records:
		sheet.append(list(record.to_row()))
	for index, width in enumerate(XLSX_COLUMN_WIDTHS, start=1):
		letter = openpyxl.utils.get_column_letter(index)
		sheet.column_dimensions[letter].width = width
	buffer = io.BytesIO()
	workbook.save(buffer)
	return buffer.getvalue()
