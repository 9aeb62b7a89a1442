import pytest

from refcount.aggregate import aggregate
from refcount.diff import diff_flat, diff_tree
from refcount.model import ConfigurationError, CountOptions, OutputStyle
from refcount.render import FlatRenderer, TreeRenderer, get_renderer, render_result


TREE = CountOptions(output_style=OutputStyle.TREE)
FLAT = CountOptions(output_style=OutputStyle.FLAT)


def test_get_renderer_by_style():
	assert isinstance(get_renderer(OutputStyle.TREE), TreeRenderer)
	assert isinstance(get_renderer(OutputStyle.FLAT), FlatRenderer)


def test_tree_render_line_order(make_refs):
	refs = make_refs("Lb/z/A;", "La/y/B;", "LB/C;", "La/x/D;", "La/y/E;")
	assert render_result(aggregate(refs, TREE)) == [
		"<root>: 5",
		"    B: 1",
		"    a: 3",
		"        x: 1",
		"        y: 2",
		"    b: 1",
		"        z: 1",
	]


def test_flat_render_line_order(make_refs):
	refs = make_refs("La/c/A;", "La/b/B;", "La/b/C;", "[I")
	assert render_result(aggregate(refs, FLAT)) == [
		"<no package>: 1",
		"a.b: 2",
		"a.c: 1",
	]


def test_tree_render_default_package(make_refs):
	assert render_result(aggregate(make_refs("[I"), TREE)) == ["<root>: 1", "    <default>: 1"]


def test_flat_diff_reports_removed_packages(make_refs):
	baseline = aggregate(make_refs("La/b/X;", "La/b/Y;", "La/c/Z;"), FLAT)
	current = aggregate(make_refs("La/b/X;", "La/b/Y;", "La/b/W;"), FLAT)
	assert render_result(current, baseline) == ["a.b: 3 (+1)", "a.c: 0 (-1)"]


def test_flat_diff_new_and_default_packages(make_refs):
	baseline = aggregate(make_refs("[I", "[I", "Lq/A;"), FLAT)
	current = aggregate(make_refs("[I", "Lp/A;", "Lq/B;"), FLAT)
	assert render_result(current, baseline) == [
		"<no package>: 1 (-1)",
		"p: 1 (+1)",
		"q: 1 (+0)",
	]
	entries = diff_flat(current, baseline)
	assert [e.name for e in entries] == ["", "p", "q"]


def test_tree_diff_skips_baseline_only_nodes(make_refs):
	baseline = aggregate(make_refs("La/b/X;", "La/b/Y;", "La/c/Z;"), TREE)
	current = aggregate(make_refs("La/b/X;", "La/b/Y;", "La/b/W;", "Ld/V;"), TREE)
	assert render_result(current, baseline) == [
		"<root>: 4",
		"    a: 3 (+0)",
		"        b: 3 (+1)",
		"    d: 1 (+1)",
	]


def test_diff_against_self_is_all_zero(make_refs):
	refs = make_refs("La/b/X;", "La/c/Y;", "LTop;", "Lz/Q;")
	for options in (TREE, FLAT):
		result = aggregate(refs, options)
		lines = render_result(result, result)
		assert all(line.endswith("(+0)") for line in lines if not line.startswith("<root>"))
	flat = aggregate(refs, FLAT)
	assert all(e.delta == 0 and e.count > 0 for e in diff_flat(flat, flat))
	tree = aggregate(refs, TREE)
	assert all(e.delta == 0 for e in diff_tree(tree, tree))


def test_diff_across_styles_is_rejected(make_refs):
	refs = make_refs("La/X;")
	with pytest.raises(ConfigurationError):
		render_result(aggregate(refs, TREE), aggregate(refs, FLAT))
	with pytest.raises(ConfigurationError):
		diff_flat(aggregate(refs, FLAT), aggregate(refs, TREE))
