"""Service module exports."""

from . import export_csv, import_csv, netting, observers, priority_queue, reconcile

__all__ = [
    "export_csv",
    "import_csv",
    "netting",
    "observers",
    "priority_queue",
    "reconcile",
]
