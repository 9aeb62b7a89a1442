from __future__ import annotations

import logging
from typing import Iterable, List, Set

from .model import CounterKind, ExternalClassRef, Filter, ReferenceDump, SymbolRef


logger = logging.getLogger(__name__)


def collect_external_refs(external_classes: Iterable[ExternalClassRef], kind: CounterKind) -> Set[SymbolRef]:
	external: Set[SymbolRef] = set()
	for class_ref in external_classes:
		external.update(class_ref.refs(kind))
	return external


def classify(refs: Iterable[SymbolRef], external_refs: Set[SymbolRef], filter: Filter) -> List[SymbolRef]:
	"""Keep the references selected by ``filter``, preserving their order.

	DEFINED_ONLY keeps references declared in the analyzed artifact (not in
	``external_refs``), REFERENCED_ONLY keeps the external ones.
	"""
	if filter is Filter.ALL:
		return list(refs)
	want_external = filter is Filter.REFERENCED_ONLY
	return [ref for ref in refs if (ref in external_refs) == want_external]


def select_references(dump: ReferenceDump, kind: CounterKind, filter: Filter) -> List[SymbolRef]:
	refs = dump.refs(kind)
	logger.info("Read in %d %s IDs.", len(refs), kind.label)
	if filter is Filter.ALL:
		return list(refs)

	logger.info("Read in %d external class references.", len(dump.external_classes))
	external_refs = collect_external_refs(dump.external_classes, kind)
	logger.info("Read in %d external %s references.", len(external_refs), kind.label)

	selected = classify(refs, external_refs, filter)
	logger.info(
		"Filtered to %d %s %s IDs.",
		len(selected),
		"defined" if filter is Filter.DEFINED_ONLY else "referenced",
		kind.label,
	)
	return selected
