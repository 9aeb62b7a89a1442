from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .descriptors import resolve_package_name, split_package_path
from .model import DEFAULT_PACKAGE_NODE, AggregationResult, CountOptions, OutputStyle, SymbolRef, TreeNode


class PackageTree:
	"""Depth-bounded trie of package segment counts."""

	def __init__(self):
		self.root = TreeNode()

	def insert(self, path: List[str], max_depth: Optional[int] = None):
		"""Count one reference along ``path``.

		Every node on the (truncated) path gains one; the node at the
		``max_depth`` boundary absorbs anything deeper.
		"""
		limit = len(path) if max_depth is None else min(len(path), max_depth)
		node = self.root
		for segment in path[:limit]:
			node.count += 1
			node = node.child(segment or DEFAULT_PACKAGE_NODE)
		node.count += 1


class FlatCounts:
	"""Exact package name -> count. The default package stays keyed as ``""``."""

	def __init__(self):
		self.counts: Dict[str, int] = {}

	def increment(self, package_name: str):
		self.counts[package_name] = self.counts.get(package_name, 0) + 1

	def sorted_counts(self) -> Dict[str, int]:
		return {name: self.counts[name] for name in sorted(self.counts)}


def aggregate(refs: Iterable[SymbolRef], options: CountOptions) -> AggregationResult:
	"""Build a fresh tree or flat aggregation for ``refs``."""
	tree = PackageTree() if options.output_style is OutputStyle.TREE else None
	flat = FlatCounts() if options.output_style is OutputStyle.FLAT else None

	for ref in refs:
		package_name = resolve_package_name(ref.class_descriptor, options.include_classes)
		if options.package_filter is not None and not package_name.startswith(options.package_filter):
			continue
		if tree is not None:
			tree.insert(split_package_path(package_name), options.max_depth)
		else:
			flat.increment(package_name)

	if tree is not None:
		return AggregationResult(style=OutputStyle.TREE, kind=options.kind, tree=tree.root)
	return AggregationResult(style=OutputStyle.FLAT, kind=options.kind, flat=flat.sorted_counts())
