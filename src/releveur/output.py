import math
from collections.abc import Iterable
from pathlib import Path

from releveur.domain import Transaction


HEADER = ['ACCOUNT', 'DATE', 'LABEL1', 'LABEL2', 'VALUE']
CATEGORIZED_HEADER = HEADER + ['CATEGORY1', 'CATEGORY2']
DELIMITER = ';'


def format_value(tx: Transaction) -> str:
    if math.isnan(tx.value):
        amount = 'NaN'
    else:
        amount = f'{tx.value:.2f}'.replace('.', ',')
    return amount if tx.is_credit else '-' + amount


def parse_value(s: str) -> float:
    return float(s.strip().replace(',', '.'))


def format_row(tx: Transaction) -> list[str]:
    return [tx.account, tx.date, tx.label1, tx.label2, format_value(tx)]


def format_categorized_row(tx: Transaction) -> list[str]:
    return format_row(tx) + [tx.category1 or '', tx.category2 or '']


def format_entry(tx: Transaction) -> str:
    return DELIMITER.join(format_row(tx))


def write_csv(path: str | Path, header: list[str], rows: Iterable[list[str]]) -> int:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    # Fields are written as-is, without quoting.
    with path.open('w', encoding='utf-8', newline='') as f:
        f.write(DELIMITER.join(header) + '\n')
        for row in rows:
            f.write(DELIMITER.join(row) + '\n')
            count += 1
    return count


def write_transactions(path: str | Path, transactions: Iterable[Transaction]) -> int:
    return write_csv(path, HEADER, (format_row(tx) for tx in transactions))


def write_categorized_transactions(path: str | Path, transactions: Iterable[Transaction]) -> int:
    return write_csv(path, CATEGORIZED_HEADER, (format_categorized_row(tx) for tx in transactions))
