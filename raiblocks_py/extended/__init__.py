__all__ = ["HistoryReconciler", "NodeSnapshot", "RaiSession", "splice_change_blocks"]

from .history_reconciler import HistoryReconciler, splice_change_blocks
from .session import NodeSnapshot, RaiSession
