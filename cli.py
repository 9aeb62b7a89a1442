from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import uvicorn

from refcount.loader import ReferenceSourceError, collect_file_names
from refcount.log import LoggingConfig, configure_logging
from refcount.model import CounterKind, CountOptions, Filter, OutputStyle
from refcount.pipeline import count_file, count_files, overall_count, summary_line
from refcount.render import render_result


def positive_int(value: str) -> int:
	number = int(value)
	if number < 1:
		raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
	return number


def options_from_args(args: argparse.Namespace) -> CountOptions:
	return CountOptions(
		include_classes=args.include_classes,
		package_filter=args.package_filter,
		max_depth=args.max_depth,
		filter=Filter(args.filter),
		output_style=OutputStyle(args.output_style),
		kind=CounterKind(args.count),
	)


def cmd_count(args: argparse.Namespace) -> None:
	configure_logging(LoggingConfig(level=args.log_level, log_file=args.log_file), force=True)
	options = options_from_args(args)
	try:
		baseline = count_file(args.compare_to, options).result if args.compare_to else None
		results = count_files(collect_file_names(args.files), options, jobs=args.jobs)
	except ReferenceSourceError as e:
		print(f"Failed: {e}", file=sys.stderr)
		sys.exit(1)

	for fc in results:
		print(f"Processing {fc.path}")
		for line in render_result(fc.result, baseline):
			print(line)
	print(summary_line(overall_count(results), options.kind))


def cmd_serve(args: argparse.Namespace) -> None:
	configure_logging(LoggingConfig(level=args.log_level, log_file=args.log_file), force=True)
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="refcount", description="Per-package method/field reference counts")
	sub = parser.add_subparsers(dest="cmd", required=True)

	common = argparse.ArgumentParser(add_help=False)
	common.add_argument(
		"--log-level",
		type=str.upper,
		default="INFO",
		choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
		help="Counts read and filtered are logged at INFO on stderr",
	)
	common.add_argument("--log-file", default=None, help="Also write diagnostics to this file")

	pc = sub.add_parser("count", parents=[common], help="Count references in one or more reference dumps")
	pc.add_argument("files", nargs="+", help="Reference dump JSON files or directories of them")
	pc.add_argument("--include-classes", action="store_true", help="Count per class, not only per package")
	pc.add_argument("--package-filter", default=None, help="Only count names starting with this prefix")
	pc.add_argument("--max-depth", type=positive_int, default=None, help="Tree depth limit (TREE style only)")
	pc.add_argument("--filter", type=str.upper, default=Filter.ALL.value, choices=[f.value for f in Filter])
	pc.add_argument(
		"--output-style",
		"--output_style",
		dest="output_style",
		type=str.upper,
		default=OutputStyle.TREE.value,
		choices=[s.value for s in OutputStyle],
	)
	pc.add_argument("--count", type=str.upper, default=CounterKind.METHODS.value, choices=[k.value for k in CounterKind])
	pc.add_argument("--compare-to", default=None, help="Baseline reference dump to diff against")
	pc.add_argument("--jobs", type=positive_int, default=1, help="Count files in parallel")
	pc.set_defaults(func=cmd_count)

	ps = sub.add_parser("serve", parents=[common], help="Run the HTTP API")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv: Optional[List[str]] = None) -> None:
	parser = build_parser()
	args = parser.parse_args(argv)
	args.func(args)


if __name__ == "__main__":
	main()
