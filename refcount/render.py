from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .diff import check_comparable, diff_flat, diff_tree
from .model import NO_PACKAGE_LABEL, ROOT_LABEL, AggregationResult, OutputStyle, TreeNode


INDENT = "    "


def format_delta(delta: int) -> str:
	return f"{delta:+d}"


class Renderer(ABC):
	"""Line-oriented text output for one output style."""

	style: OutputStyle

	@abstractmethod
	def render(self, result: AggregationResult) -> List[str]:
		...

	@abstractmethod
	def render_diff(self, result: AggregationResult, baseline: AggregationResult) -> List[str]:
		...


class TreeRenderer(Renderer):
	style = OutputStyle.TREE

	def render(self, result: AggregationResult) -> List[str]:
		lines = [f"{ROOT_LABEL}: {result.tree.count}"]
		self._render_children(result.tree, 1, lines)
		return lines

	def _render_children(self, node: TreeNode, depth: int, lines: List[str]) -> None:
		for name, child in node.sorted_children():
			lines.append(f"{INDENT * depth}{name}: {child.count}")
			self._render_children(child, depth + 1, lines)

	def render_diff(self, result: AggregationResult, baseline: AggregationResult) -> List[str]:
		entries = diff_tree(result, baseline)
		lines = [f"{ROOT_LABEL}: {result.tree.count}"]
		for e in entries:
			lines.append(f"{INDENT * e.depth}{e.name}: {e.count} ({format_delta(e.delta)})")
		return lines


class FlatRenderer(Renderer):
	style = OutputStyle.FLAT

	@staticmethod
	def display_name(package_name: str) -> str:
		return package_name or NO_PACKAGE_LABEL

	def render(self, result: AggregationResult) -> List[str]:
		counts = result.flat or {}
		return [f"{self.display_name(name)}: {counts[name]}" for name in sorted(counts)]

	def render_diff(self, result: AggregationResult, baseline: AggregationResult) -> List[str]:
		return [
			f"{self.display_name(e.name)}: {e.count} ({format_delta(e.delta)})"
			for e in diff_flat(result, baseline)
		]


RENDERERS: Dict[OutputStyle, Renderer] = {
	OutputStyle.TREE: TreeRenderer(),
	OutputStyle.FLAT: FlatRenderer(),
}


def get_renderer(style: OutputStyle) -> Renderer:
	return RENDERERS[style]


def render_result(result: AggregationResult, baseline: Optional[AggregationResult] = None) -> List[str]:
	"""Render ``result``, diffed against ``baseline`` when one is given."""
	renderer = get_renderer(result.style)
	if baseline is None:
		return renderer.render(result)
	check_comparable(result, baseline)
	return renderer.render_diff(result, baseline)
