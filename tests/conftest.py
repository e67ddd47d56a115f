"""
Pytest configuration for local imports and shared fixtures.
"""

# Standard Library
import datetime
import os
import sys

# PIP3 modules
import pytest

#============================================


def _ensure_repo_on_path() -> None:
	"""
	Ensure the repository root is on sys.path.
	"""
	repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
	if repo_root not in sys.path:
		sys.path.insert(0, repo_root)


_ensure_repo_on_path()

import testcase_report.records


#============================================
def build_case(index: int, **overrides) -> testcase_report.records.TestCase:
	"""
	Build a short single-line test case.

	Args:
		index: Case number used in the id.
		**overrides: Field values to replace.

	Returns:
		TestCase.
	"""
	fields = {
		"id": f"TC-{index:03d}",
		"title": "Login works",
		"steps": ("Open page",),
		"expected_result": "User sees home",
		"category": "Positive",
		"type": "Sanity",
		"test_data": None,
	}
	fields.update(overrides)
	return testcase_report.records.TestCase(**fields)


@pytest.fixture
def make_case():
	return build_case


@pytest.fixture
def fixed_time() -> datetime.datetime:
	return datetime.datetime(2026, 3, 14, 9, 26, 53)
