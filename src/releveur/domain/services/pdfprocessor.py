import logging
import os
import re
from collections.abc import Iterable, Iterator

import pdfplumber
import pdfplumber.page
from releveur.domain import PartialEntry, StatementContext, StatementError, StatementResult, Transaction
from releveur.domain.services.balance import compute_balance
from releveur.domain.services.dates import resolve_date
from releveur.domain.services.scanner import EntryReconstructor


STATEMENT_FILE_PATTERN = re.compile(r'releve_([^_]+)_(\d{4})(\d{2})\.pdf')


def parse_statement_filename(file: str) -> StatementContext:
    m = STATEMENT_FILE_PATTERN.fullmatch(os.path.basename(file))
    if m is None:
        raise StatementError(f'{file} is not named releve_<account>_<YYYYMM>.pdf')

    month = int(m.group(3))
    if not 1 <= month <= 12:
        raise StatementError(f'{file} has an invalid statement month {month}')

    return StatementContext(file=file, account=m.group(1), year=int(m.group(2)), month=month)


class PDFProcessor:
    X_TOLERANCE = 1
    Y_TOLERANCE = 3

    @staticmethod
    def process(file: str, logger: logging.Logger) -> StatementResult:
        logger.info('Processing file %s', file)
        processor = PDFProcessor(parse_statement_filename(file), logger)

        with pdfplumber.open(file) as pdf:
            pages = (processor.extract_fragments(page) for page in processor.iter_pages(pdf.pages))
            return processor.process_fragments(pages)

    def __init__(self, context: StatementContext, logger: logging.Logger):
        self.context = context
        self.logger = logger
        self.warnings = []

    def iter_pages(self, pages: Iterable[pdfplumber.page.Page]) -> Iterator[pdfplumber.page.Page]:
        for page in pages:
            self.logger.info('Processing page %d', page.page_number)
            yield page

    def extract_fragments(self, page: pdfplumber.page.Page) -> list[str]:
        """Text runs of the page in reading order, with ``''`` after each line."""
        words = page.extract_words(
            x_tolerance=PDFProcessor.X_TOLERANCE,
            y_tolerance=PDFProcessor.Y_TOLERANCE,
            keep_blank_chars=True,
            use_text_flow=True,
        )

        fragments = []
        top = None
        for word in words:
            if top is not None and abs(word['top'] - top) > PDFProcessor.Y_TOLERANCE:
                fragments.append('')
            top = word['top']
            fragments.append(word['text'])

        if fragments:
            fragments.append('')
        return fragments

    def process_fragments(self, pages: Iterable[list[str]]) -> StatementResult:
        entries = []
        for fragments in pages:
            entries.extend(self.process_page(fragments))

        transactions = self.post_process_transactions(entries)
        balance = compute_balance(transactions)
        self.logger.info(
            '%s: %d transactions, debit %.2f, credit %.2f',
            self.context.file, len(transactions), balance.debit, balance.credit,
        )
        return StatementResult(
            context=self.context,
            transactions=transactions,
            balance=balance,
            warnings=list(self.warnings),
        )

    def process_page(self, fragments: Iterable[str]) -> list[PartialEntry]:
        entries = EntryReconstructor(self.logger).scan(fragments)
        if not entries:
            self.logger.info('No transaction found on current page')
        return entries

    def post_process_transactions(self, entries: list[PartialEntry]) -> list[Transaction]:
        transactions = []
        total_credit = 0.0
        total_debit = 0.0
        for entry in entries:
            tx = self.to_transaction(entry)
            if not entry.date.is_valid:
                self.warn(f'invalid date {tx.date} for {tx.label1}')
            if entry.parse_error:
                self.warn(f'invalid value {tx.value_raw!r} for {tx.date} {tx.label1}')

            if tx.is_credit:
                total_credit += tx.value
                self.logger.debug('%-55s  %10.2f  %10s  %10.2f', tx.label1, tx.value, '', total_credit)
            else:
                total_debit += tx.value
                self.logger.debug('%-55s  %10s  %10.2f  %10.2f', tx.label1, '', tx.value, total_debit)
            transactions.append(tx)

        return transactions

    def warn(self, message: str) -> None:
        message = f'{self.context.file}: {message}'
        self.logger.warning(message)
        self.warnings.append(message)

    def to_transaction(self, entry: PartialEntry) -> Transaction:
        assert entry.is_credit is not None, f'Entry emitted without polarity {entry}'
        entry_date = resolve_date(entry.date, self.context.year, self.context.month)
        return Transaction(
            account=self.context.account,
            date=str(entry_date),
            label1=entry.label1,
            label2=entry.label2 or '',
            value=entry.value,
            is_credit=entry.is_credit,
            value_raw=entry.value_raw,
            parse_error=entry.parse_error or not entry.date.is_valid,
        )
