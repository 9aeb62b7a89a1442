from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List

from pydantic import BaseModel

from .aggregate import aggregate
from .classify import select_references
from .loader import load_reference_dump
from .model import AggregationResult, CounterKind, CountOptions, ReferenceDump


logger = logging.getLogger(__name__)


class FileCount(BaseModel):
	path: str
	result: AggregationResult


def count_dump(dump: ReferenceDump, options: CountOptions) -> AggregationResult:
	refs = select_references(dump, options.kind, options.filter)
	return aggregate(refs, options)


def count_file(path: str, options: CountOptions) -> FileCount:
	logger.debug("Counting references in %s", path)
	dump = load_reference_dump(path)
	return FileCount(path=path, result=count_dump(dump, options))


def count_files(paths: Iterable[str], options: CountOptions, jobs: int = 1) -> List[FileCount]:
	"""Count every file independently; results keep the input order.

	The first failing file aborts the whole run.
	"""
	paths = list(paths)
	if jobs <= 1 or len(paths) <= 1:
		return [count_file(p, options) for p in paths]
	with ThreadPoolExecutor(max_workers=jobs, thread_name_prefix="CountWorker") as executor:
		return list(executor.map(lambda p: count_file(p, options), paths))


def overall_count(results: Iterable[FileCount]) -> int:
	return sum(fc.result.overall_count for fc in results)


def summary_line(total: int, kind: CounterKind) -> str:
	return f"Overall {kind.label} count: {total}"
