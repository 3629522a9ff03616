import logging
from collections.abc import Iterable
from dataclasses import dataclass

from releveur.domain import Transaction


@dataclass(frozen=True)
class CategoryRule:
    is_credit: bool
    keywords: tuple[str, ...]
    category1: str
    category2: str
    label1_prefix: str | None = None

    def matches(self, tx: Transaction) -> bool:
        if tx.is_credit != self.is_credit:
            return False
        if self.label1_prefix is not None and not tx.label1.startswith(self.label1_prefix):
            return False
        return search_in_entry(tx, self.keywords)


@dataclass(frozen=True)
class CategoryRules:
    rules: tuple[CategoryRule, ...]
    credit_default: tuple[str, str] | None = ('VIREMENT EXTERNE', 'OTHERS')
    debit_default: tuple[str, str] | None = None


def search_in_entry(tx: Transaction, keywords: Iterable[str]) -> bool:
    label1 = tx.label1.upper()
    label2 = (tx.label2 or '').upper()
    for keyword in keywords:
        keyword = keyword.upper()
        if keyword in label1 or keyword in label2:
            return True
    return False


class Categorizer:
    """Assigns ``category1``/``category2`` from an ordered rule list.

    The first matching rule wins. Entries matching nothing get the default of
    their polarity; when that default is ``None`` the entry is left
    uncategorized and handed back for manual review.
    """

    def __init__(self, rules: CategoryRules, logger: logging.Logger):
        self.rules = rules
        self.logger = logger

    def find_category(self, tx: Transaction) -> tuple[str, str] | None:
        for rule in self.rules.rules:
            if rule.matches(tx):
                return rule.category1, rule.category2
        if tx.is_credit:
            return self.rules.credit_default
        return self.rules.debit_default

    def categorize(self, transactions: Iterable[Transaction]) -> list[Transaction]:
        uncategorized = []
        for tx in transactions:
            category = self.find_category(tx)
            if category is None:
                self.logger.warning('Uncategorized transaction %s', tx)
                uncategorized.append(tx)
                continue
            tx.category1, tx.category2 = category
        self.logger.info('%d uncategorized transactions', len(uncategorized))
        return uncategorized
