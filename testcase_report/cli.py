"""
CLI entry points for test case report export.
"""

# Standard Library
import argparse
import datetime
import json
import pathlib
import time

# local repo modules
import testcase_report as tcr
import testcase_report.config
import testcase_report.exporters
import testcase_report.records
import testcase_report.render


RenderConfig = tcr.config.RenderConfig
RenderResult = tcr.render.RenderResult

FORMAT_SUFFIXES = {
	"pdf": ".pdf",
	"csv": ".csv",
	"xlsx": ".xlsx",
}


#============================================
def build_config(args: argparse.Namespace) -> RenderConfig:
	"""
	Build render config from CLI args.

	Args:
		args: Parsed argparse namespace.

	Returns:
		RenderConfig.
	"""
	overrides = {}
	if args.margin is not None:
		overrides["margin"] = args.margin
	if args.min_row_height is not None:
		overrides["min_row_height"] = args.min_row_height
	if args.max_row_height is not None:
		overrides["max_row_height"] = args.max_row_height
	if args.title is not None:
		overrides["title"] = args.title
	return tcr.config.build_config(**overrides)


#============================================
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command line arguments.

	Args:
		argv: Argument list, sys.argv when None.

	Returns:
		Parsed argparse namespace.
	"""
	parser = argparse.ArgumentParser(description="Export test cases as a PDF report, CSV or Excel sheet.")
	parser.add_argument("input_path", help="JSON file with a list of test cases.")

	output_group = parser.add_argument_group("Output")
	output_group.add_argument("-o", "--output", dest="output_path", required=True, help="Output file path.")
	output_group.add_argument(
		"-f",
		"--format",
		dest="output_format",
		choices=sorted(FORMAT_SUFFIXES),
		default=None,
		help="Output format, guessed from the output suffix when omitted.",
	)
	output_group.add_argument("-m", "--manifest", dest="manifest_path", default=None, help="Output manifest JSON path.")

	layout_group = parser.add_argument_group("Layout")
	layout_group.add_argument("-t", "--title", dest="title", default=None, help="Report title.")
	layout_group.add_argument("--margin", dest="margin", type=float, default=None, help="Page margin in points.")
	layout_group.add_argument("--min-row-height", dest="min_row_height", type=float, default=None, help="Minimum row height in points.")
	layout_group.add_argument("--max-row-height", dest="max_row_height", type=float, default=None, help="Maximum row height in points.")

	behavior_group = parser.add_argument_group("Behavior")
	behavior_group.add_argument("-q", "--quiet", dest="verbose", action="store_false", help="Only print errors.")
	behavior_group.add_argument("-v", "--verbose", dest="verbose", action="store_true", help="Print progress.")

	parser.set_defaults(verbose=True)

	args = parser.parse_args(argv)
	return args


#============================================
def resolve_format(args: argparse.Namespace) -> str:
	"""
	Pick the output format from the flag or the output suffix.

	Args:
		args: Parsed argparse namespace.

	Returns:
		One of "pdf", "csv" or "xlsx".
	"""
	if args.output_format is not None:
		return args.output_format
	suffix = pathlib.Path(args.output_path).suffix.lower()
	for name, known_suffix in FORMAT_SUFFIXES.items():
		if suffix == known_suffix:
			return name
	return "pdf"


#============================================
def write_manifest(
	manifest_path: pathlib.Path,
	input_path: pathlib.Path,
	output_path: pathlib.Path,
	result: RenderResult,
	config: RenderConfig,
	generated_at: datetime.datetime,
) -> None:
	"""
	Write a manifest JSON file for a PDF export.

	Args:
		manifest_path: Output path.
		input_path: Input JSON file.
		output_path: Written PDF path.
		result: Render result.
		config: Render configuration.
		generated_at: Report timestamp.
	"""
	data = {
		"input": str(input_path),
		"output": str(output_path),
		"generated_at": generated_at.isoformat(timespec="seconds"),
		"pages": result.pages,
		"table_pages": result.table_pages,
		"rows": result.rows,
		"bytes": len(result.data),
		"stats": {
			"total": result.stats.total,
			"by_type": result.stats.by_type,
			"by_category": result.stats.by_category,
		},
		"layout": {
			"page_width": config.page_width,
			"page_height": config.page_height,
			"margin": config.margin,
			"footer_reserve": config.footer_reserve,
			"min_row_height": config.min_row_height,
			"max_row_height": config.max_row_height,
		},
	}
	with manifest_path.open("w", encoding="utf-8") as handle:
		json.dump(data, handle, indent=2, sort_keys=True)


#============================================
def run_pipeline(args: argparse.Namespace) -> None:
	"""
	Load test cases and write the requested export.

	Args:
		args: Parsed argparse namespace.
	"""
	verbose = args.verbose
	input_path = pathlib.Path(args.input_path)
	output_path = pathlib.Path(args.output_path)
	output_format = resolve_format(args)
	if verbose:
		print("Test case export")
		print(f"Input: {input_path}")
		print(f"Output: {output_path} ({output_format})")

	start_time = time.perf_counter()
	records = tcr.records.load_test_cases(input_path)
	if verbose:
		print(f"Test cases loaded: {len(records)}")

	if output_format == "csv":
		output_path.write_text(tcr.exporters.convert_to_csv(records), encoding="utf-8")
	elif output_format == "xlsx":
		output_path.write_bytes(tcr.exporters.convert_to_xlsx(records))
	else:
		config = build_config(args)
		generated_at = datetime.datetime.now()
		result = tcr.render.render_report(records, config=config, generated_at=generated_at)
		output_path.write_bytes(result.data)
		manifest_path = args.manifest_path
		if manifest_path is None:
			manifest_path = f"{output_path}.json"
		write_manifest(
			pathlib.Path(manifest_path),
			input_path,
			output_path,
			result,
			config,
			generated_at,
		)
		if verbose:
			print(f"Pages written: {result.pages} ({result.table_pages} table pages)")
			print(f"Rows drawn: {result.rows}")
			print(f"Manifest written: {manifest_path}")

	if verbose:
		total_time = time.perf_counter() - start_time
		print("Timing: total={:.2f}s".format(total_time))


#============================================
def main(argv: list[str] | None = None) -> None:
	"""
	Main entry point.
	"""
	args = parse_args(argv)
	run_pipeline(args)
