from __future__ import annotations

import logging
import os
from typing import Iterable, List

from pydantic import ValidationError

from .model import ReferenceDump


logger = logging.getLogger(__name__)


class ReferenceSourceError(Exception):
	"""A reference dump could not be read or did not match the schema."""


def collect_file_names(inputs: Iterable[str]) -> List[str]:
	"""Expand directories (one level) into their entries; files pass through."""
	file_names: List[str] = []
	for name in inputs:
		if os.path.isdir(name):
			dir_path = os.path.abspath(name)
			for entry in sorted(os.listdir(dir_path)):
				file_names.append(os.path.join(dir_path, entry))
		else:
			file_names.append(name)
	return file_names


def load_reference_dump(path: str) -> ReferenceDump:
	try:
		with open(path, "r", encoding="utf-8") as fh:
			text = fh.read()
	except OSError as e:
		raise ReferenceSourceError(f"Unable to open '{path}': {e.strerror or e}") from e

	try:
		dump = ReferenceDump.model_validate_json(text)
	except ValidationError as e:
		raise ReferenceSourceError(f"Invalid reference dump '{path}': {e.error_count()} error(s)") from e

	logger.debug(
		"Loaded %s: %d methods, %d fields, %d external classes",
		path,
		len(dump.methods),
		len(dump.fields),
		len(dump.external_classes),
	)
	return dump
