from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_PACKAGE_NODE = "<default>"
NO_PACKAGE_LABEL = "<no package>"
ROOT_LABEL = "<root>"


class ConfigurationError(Exception):
	"""Raised when two results cannot be compared (different output styles)."""


class CounterKind(str, Enum):
	METHODS = "METHODS"
	FIELDS = "FIELDS"

	@property
	def label(self) -> str:
		return "method" if self is CounterKind.METHODS else "field"


class Filter(str, Enum):
	ALL = "ALL"
	DEFINED_ONLY = "DEFINED_ONLY"
	REFERENCED_ONLY = "REFERENCED_ONLY"


class OutputStyle(str, Enum):
	TREE = "TREE"
	FLAT = "FLAT"


class SymbolRef(BaseModel):
	model_config = ConfigDict(frozen=True)

	class_descriptor: str
	name: str
	type_descriptor: str = ""


class ExternalClassRef(BaseModel):
	descriptor: str
	methods: List[SymbolRef] = []
	fields: List[SymbolRef] = []

	def refs(self, kind: CounterKind) -> List[SymbolRef]:
		return self.methods if kind is CounterKind.METHODS else self.fields


class ReferenceDump(BaseModel):
	methods: List[SymbolRef] = []
	fields: List[SymbolRef] = []
	external_classes: List[ExternalClassRef] = []

	def refs(self, kind: CounterKind) -> List[SymbolRef]:
		return self.methods if kind is CounterKind.METHODS else self.fields


class CountOptions(BaseModel):
	model_config = ConfigDict(frozen=True)

	include_classes: bool = False
	package_filter: Optional[str] = None
	max_depth: Optional[int] = Field(default=None, ge=1)
	filter: Filter = Filter.ALL
	output_style: OutputStyle = OutputStyle.TREE
	kind: CounterKind = CounterKind.METHODS


class TreeNode(BaseModel):
	count: int = 0
	children: Dict[str, TreeNode] = {}

	def child(self, name: str) -> TreeNode:
		node = self.children.get(name)
		if node is None:
			node = TreeNode()
			self.children[name] = node
		return node

	def sorted_children(self) -> Iterator[Tuple[str, TreeNode]]:
		for name in sorted(self.children):
			yield name, self.children[name]


TreeNode.model_rebuild()


class AggregationResult(BaseModel):
	style: OutputStyle
	kind: CounterKind = CounterKind.METHODS
	tree: Optional[TreeNode] = None
	flat: Optional[Dict[str, int]] = None

	@property
	def overall_count(self) -> int:
		if self.style is OutputStyle.TREE:
			return self.tree.count if self.tree is not None else 0
		return sum((self.flat or {}).values())


class DiffEntry(BaseModel):
	name: str
	depth: int = 0
	count: int
	delta: int
