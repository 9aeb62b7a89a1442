import json
import logging

import pytest

from refcount.model import SymbolRef


@pytest.fixture
def make_refs():
	"""Build distinct method references, one per class descriptor."""

	def _make(*descriptors: str):
		return [SymbolRef(class_descriptor=d, name=f"m{i}", type_descriptor="()V") for i, d in enumerate(descriptors)]

	return _make


@pytest.fixture
def write_dump(tmp_path):
	"""Write a reference dump JSON file and return its path."""

	def _write(name: str, methods=(), fields=(), external_classes=()) -> str:
		payload = {
			"methods": [r.model_dump() for r in methods],
			"fields": [r.model_dump() for r in fields],
			"external_classes": [c.model_dump() for c in external_classes],
		}
		path = tmp_path / name
		path.write_text(json.dumps(payload))
		return str(path)

	return _write


@pytest.fixture(autouse=True)
def reset_refcount_logging():
	yield
	root = logging.getLogger()
	for handler in [h for h in root.handlers if getattr(h, "_refcount_handler", False)]:
		root.removeHandler(handler)
		handler.close()
