"""
Test case records and JSON loading.
"""

# Standard Library
import dataclasses
import json
import pathlib


RECORD_FIELDS = ("ID", "Title", "Category", "Type", "Steps", "Test Data", "Expected Result")
REQUIRED_STRING_KEYS = ("id", "title", "expectedResult", "category", "type")


#============================================
class RecordError(ValueError):
	"""
	Raised when an input test case does not match the record schema.
	"""


@dataclasses.dataclass(frozen=True)
class TestCase:
	id: str
	title: str
	steps: tuple[str, ...]
	expected_result: str
	category: str
	type: str
	test_data: str | None = None

	# keep pytest from collecting this as a test class
	__test__ = False

	@property
	def steps_text(self) -> str:
		return "\n".join(self.steps)

	def to_row(self) -> tuple[str, ...]:
		"""
		Project the record onto the report columns.

		Returns:
			Cell strings in RECORD_FIELDS order.
		"""
		return (
			self.id,
			self.title,
			self.category,
			self.type,
			self.steps_text,
			self.test_data or "",
			self.expected_result,
		)


#============================================
def parse_test_case(data: dict, index: int) -> TestCase:
	"""
	Build a TestCase from a decoded JSON object.

	Args:
		data: Decoded JSON object using camelCase keys.
		index: Position in the input, used in error messages.

	Returns:
		TestCase.
	"""
	if not isinstance(data, dict):
		raise RecordError(f"case {index}: expected an object, got {type(data).__name__}")
	for key in REQUIRED_STRING_KEYS:
		value = data.get(key)
		if not isinstance(value, str):
			raise RecordError(f"case {index}: field {key!r} must be a string")
	steps = data.get("steps")
	if not isinstance(steps, list) or not all(isinstance(step, str) for step in steps):
		raise RecordError(f"case {index}: field 'steps' must be a list of strings")
	test_data = data.get("testData")
	if test_data is not None and not isinstance(test_data, str):
		raise RecordError(f"case {index}: field 'testData' must be a string")
	return TestCase(
		id=data["id"],
		title=data["title"],
		steps=tuple(steps),
		expected_result=data["expectedResult"],
		category=data["category"],
		type=data["type"],
		test_data=test_data,
	)


#============================================
def parse_test_cases(payload) -> list[TestCase]:
	"""
	Parse a decoded JSON payload into test cases.

	Args:
		payload: Either a list of case objects or an object with a "cases" list.

	Returns:
		List of TestCase entries in input order.
	"""
	if isinstance(payload, dict):
		payload = payload.get("cases")
	if not isinstance(payload, list):
		raise RecordError("expected a list of cases or an object with a 'cases' list")
	return [parse_test_case(item, index) for index, item in enumerate(payload)]


#============================================
def load_test_cases(path: pathlib.Path) -> list[TestCase]:
	"""
	Load test cases from a JSON file.

	Args:
		path: JSON file path.

	Returns:
		List of TestCase entries.
	"""
	text = path.read_text(encoding="utf-8")
	try:
		payload = json.loads(text)
	except json.JSONDecodeError as error:
		raise RecordError(f"{path}: invalid JSON ({error})") from error
	return parse_test_cases(payload)
