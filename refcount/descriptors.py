from __future__ import annotations

from typing import Dict, List


PRIMITIVE_TYPES: Dict[str, str] = {
	"B": "byte",
	"C": "char",
	"D": "double",
	"F": "float",
	"I": "int",
	"J": "long",
	"S": "short",
	"V": "void",
	"Z": "boolean",
}


def descriptor_to_dot(descriptor: str) -> str:
	"""Convert a type descriptor like ``Lcom/foo/Bar;`` to ``com.foo.Bar``.

	Array dimensions move to the end (``[[I`` becomes ``int[][]``).
	"""
	body = descriptor
	array_depth = 0
	while len(body) > 1 and body.startswith("["):
		body = body[1:]
		array_depth += 1

	if len(body) == 1:
		body = PRIMITIVE_TYPES.get(body, body)
	elif body.startswith("L") and body.endswith(";"):
		body = body[1:-1]

	return body.replace("/", ".") + "[]" * array_depth


def package_name_only(descriptor: str) -> str:
	dotted = descriptor_to_dot(descriptor)
	if "." not in dotted:
		return ""
	return dotted.rsplit(".", 1)[0]


def resolve_package_name(descriptor: str, include_classes: bool) -> str:
	# Nested classes become sub-packages of their enclosing class.
	if include_classes:
		return descriptor_to_dot(descriptor).replace("$", ".")
	return package_name_only(descriptor)


def split_package_path(name: str) -> List[str]:
	"""Split a dotted name into segments; ``""`` is the default package."""
	segments = name.split(".")
	while len(segments) > 1 and segments[-1] == "":
		segments.pop()
	return segments
