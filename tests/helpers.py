"""Builders shared by the test modules."""

from __future__ import annotations

from releveur.domain import Transaction


def make_tx(
    label1: str,
    label2: str = '',
    value: float = 10.0,
    is_credit: bool = False,
    account: str = '00012345',
    date: str = '2024-1-5',
) -> Transaction:
    return Transaction(
        account=account,
        date=date,
        label1=label1,
        label2=label2,
        value=value,
        is_credit=is_credit,
    )


class FakePage:
    """Stands in for ``pdfplumber.page.Page``; lines are lists of text runs."""

    def __init__(self, page_number: int, lines: list[list[str]]):
        self.page_number = page_number
        self.lines = lines
        self.extract_kwargs = None

    def extract_words(self, **kwargs):
        self.extract_kwargs = kwargs
        words = []
        for i, line in enumerate(self.lines):
            for text in line:
                words.append({'text': text, 'top': 100.0 + 12.0 * i, 'x0': 0.0})
        return words


class FakePDF:
    def __init__(self, pages: list[FakePage]):
        self.pages = pages

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False
