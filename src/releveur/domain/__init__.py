from .value_objects import (
    Balance,
    EntryDate,
    PartialEntry,
    RunResult,
    StatementContext,
    StatementError,
    StatementResult,
    Transaction,
)

__all__ = [
    'Balance',
    'EntryDate',
    'PartialEntry',
    'RunResult',
    'StatementContext',
    'StatementError',
    'StatementResult',
    'Transaction',
]
