"""
History reconstruction for Classic (tree based) and Envy (raw text based) messages.
"""
from currentcost.parsing.history.decode import (
    HistoryRecord,
    HistoryTable,
    SPANS,
    classic_history,
    envy_history,
)

__all__ = ["HistoryRecord", "HistoryTable", "SPANS", "classic_history", "envy_history"]
