"""Per-package counts of method and field references extracted from a binary.

Modules:
- model.py: Reference, option and result data structures.
- descriptors.py: Type descriptor to package/class name resolution.
- classify.py: Defined-only / referenced-only partitioning.
- aggregate.py: Package tree and flat count aggregation.
- diff.py: Deltas between a result and a baseline.
- render.py: Line-oriented text output per output style.
- loader.py: Reading reference dumps from disk.
- pipeline.py: Per-file runs and the overall summary.
- log.py: Logging setup.
"""

__all__ = [
	"model",
	"descriptors",
	"classify",
	"aggregate",
	"diff",
	"render",
	"loader",
	"pipeline",
	"log",
]
