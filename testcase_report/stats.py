"""
Aggregate counts shown on the title page and footers.
"""

# Standard Library
import dataclasses

# local repo modules
import testcase_report as tcr
import testcase_report.config
import testcase_report.records
import testcase_report.text


TestCase = tcr.records.TestCase
CATEGORY_LABELS = tcr.config.CATEGORY_LABELS
CLASSIFICATION_LABELS = tcr.config.CLASSIFICATION_LABELS


@dataclasses.dataclass(frozen=True)
class ReportStats:
	total: int
	by_type: dict[str, int]
	by_category: dict[str, int]

	@property
	def categorized(self) -> int:
		return sum(self.by_category.values())


#============================================
def compute_stats(records: list[TestCase]) -> ReportStats:
	"""
	Count test cases per classification and per named category.

	Every classification label is counted, including unknown ones, so the
	type counts always sum to the total. Labels are counted as they are
	drawn, after sanitizing. Categories outside CATEGORY_LABELS
	are not counted.

	Args:
		records: Test cases in report order.

	Returns:
		ReportStats.
	"""
	by_type = {label: 0 for label in CLASSIFICATION_LABELS}
	by_category = {label: 0 for label in CATEGORY_LABELS}
	total = 0
	for record in records:
		total += 1
		label = tcr.text.sanitize_text(record.type)
		by_type[label] = by_type.get(label, 0) + 1
		category = tcr.text.sanitize_text(record.category)
		if category in by_category:
			by_category[category] += 1
	return ReportStats(total=total, by_type=by_type, by_category=by_category)
