import logging
from collections.abc import Callable
from pathlib import Path

from releveur.domain import RunResult, StatementError, StatementResult
from releveur.domain.services.categorizer import Categorizer, CategoryRules
from releveur.domain.services.pdfprocessor import PDFProcessor
from releveur.domain.services.rules import DEFAULT_RULES


def list_statement_files(directory: str | Path) -> list[Path]:
    path = Path(directory)
    if not path.exists():
        raise StatementError(f'{directory} does not exist')
    if not path.is_dir():
        raise StatementError(f'{directory} must be a directory')
    return sorted(p for p in path.iterdir() if p.is_file() and not p.name.startswith('.'))


def run(
    directory: str | Path,
    logger: logging.Logger,
    rules: CategoryRules = DEFAULT_RULES,
    process: Callable[[str, logging.Logger], StatementResult] = PDFProcessor.process,
) -> RunResult:
    """Parse every statement of ``directory`` then categorize all transactions."""
    result = RunResult()
    for file in list_statement_files(directory):
        statement = process(str(file), logger)
        result.statements.append(statement)
        result.warnings.extend(statement.warnings)

    result.uncategorized = Categorizer(rules, logger).categorize(result.transactions)
    for tx in result.uncategorized:
        result.warnings.append(f'Uncategorized transaction {tx.account} {tx.date} {tx.label1} {tx.label2}')
    return result
