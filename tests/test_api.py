import pytest
from fastapi.testclient import TestClient

from api import app


client = TestClient(app)


@pytest.fixture
def dump_of(make_refs):
	def _dump(*descriptors):
		return {"methods": [r.model_dump() for r in make_refs(*descriptors)]}

	return _dump


def test_count_tree(dump_of):
	resp = client.post("/count", json={"dump": dump_of("La/b/X;", "La/b/Y;", "La/c/Z;"), "options": {"max_depth": 1}})
	assert resp.status_code == 200
	assert resp.json() == {"overall_count": 3, "lines": ["<root>: 3", "    a: 3"]}


def test_count_flat_diff(dump_of):
	resp = client.post(
		"/count",
		json={
			"dump": dump_of("La/b/X;", "La/b/Y;", "La/b/W;"),
			"baseline": dump_of("La/b/X;", "La/b/Y;", "La/c/Z;"),
			"options": {"output_style": "FLAT"},
		},
	)
	assert resp.status_code == 200
	assert resp.json()["lines"] == ["a.b: 3 (+1)", "a.c: 0 (-1)"]


def test_mixed_styles_rejected(dump_of):
	resp = client.post(
		"/count",
		json={
			"dump": dump_of("La/X;"),
			"baseline": dump_of("La/X;"),
			"options": {"output_style": "TREE"},
			"baseline_options": {"output_style": "FLAT"},
		},
	)
	assert resp.status_code == 400


def test_invalid_options_rejected(dump_of):
	resp = client.post("/count", json={"dump": dump_of("La/X;"), "options": {"max_depth": 0}})
	assert resp.status_code == 422
	assert client.get("/health").json() == {"status": "ok"}
