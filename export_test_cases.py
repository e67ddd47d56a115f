#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Export test cases from JSON as a paginated PDF report, CSV or Excel sheet.
"""

# local repo modules
import testcase_report.cli


if __name__ == "__main__":
	testcase_report.cli.main()
