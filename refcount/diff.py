from __future__ import annotations

from typing import List, Optional

from .model import AggregationResult, ConfigurationError, DiffEntry, TreeNode


def check_comparable(current: AggregationResult, baseline: AggregationResult) -> None:
	if current.style is not baseline.style:
		raise ConfigurationError(
			f"Cannot compare a {current.style.value} result with a {baseline.style.value} baseline"
		)


def _diff_children(node: TreeNode, baseline: Optional[TreeNode], depth: int, entries: List[DiffEntry]) -> None:
	for name, child in node.sorted_children():
		baseline_child = baseline.children.get(name) if baseline is not None else None
		baseline_count = baseline_child.count if baseline_child is not None else 0
		entries.append(DiffEntry(name=name, depth=depth, count=child.count, delta=child.count - baseline_count))
		_diff_children(child, baseline_child, depth + 1, entries)


def diff_tree(current: AggregationResult, baseline: AggregationResult) -> List[DiffEntry]:
	"""Per-node deltas, visiting the current tree only.

	Nodes present only in the baseline are not reported.
	"""
	check_comparable(current, baseline)
	entries: List[DiffEntry] = []
	_diff_children(current.tree, baseline.tree, 1, entries)
	return entries


def diff_flat(current: AggregationResult, baseline: AggregationResult) -> List[DiffEntry]:
	"""Per-package deltas, followed by packages that disappeared since the baseline."""
	check_comparable(current, baseline)
	current_counts = current.flat or {}
	baseline_counts = baseline.flat or {}

	entries: List[DiffEntry] = []
	for name in sorted(current_counts):
		count = current_counts[name]
		entries.append(DiffEntry(name=name, count=count, delta=count - baseline_counts.get(name, 0)))
	for name in sorted(baseline_counts):
		if name not in current_counts:
			entries.append(DiffEntry(name=name, count=0, delta=-baseline_counts[name]))
	return entries

