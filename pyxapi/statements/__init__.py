"""Statements and the result/context structures they own."""

from .context import Context, ContextActivities
from .result import Result, Score
from .statement import Statement, StatementObject
from .statement_ref import StatementRef

__all__ = [
    "Context",
    "ContextActivities",
    "Result",
    "Score",
    "Statement",
    "StatementObject",
    "StatementRef",
]
