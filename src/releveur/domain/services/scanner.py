import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum

from releveur.domain import EntryDate, PartialEntry
from releveur.domain.services.fields import (
    is_agios_rebate,
    is_cheque,
    is_credit_label,
    is_date_token,
    parse_amount,
    parse_date_part,
    split_cheque_label,
)


class Step(Enum):
    SEEKING_DATE = 0
    SKIP_FILLER = 1
    START_LABEL1 = 2
    CONTINUE_LABEL1 = 3
    BRANCH = 4
    CONTINUE_LABEL2 = 5
    VALUE = 6


@dataclass(frozen=True)
class ScanState:
    step: Step = Step.SEEKING_DATE
    entry: PartialEntry | None = None


INITIAL_STATE = ScanState()


def _complete(entry: PartialEntry, fragment: str, **changes) -> PartialEntry:
    value = parse_amount(fragment)
    return replace(entry, value=value, value_raw=fragment, parse_error=math.isnan(value), **changes)


def advance(state: ScanState, fragment: str) -> tuple[ScanState, PartialEntry | None]:
    """Feed one fragment to the scanner.

    Returns the next state and the entry completed by this fragment, if any.
    A statement line is laid out as: date, filler, label1 lines, blank,
    label2 lines, blank, value. Cheques and agio rebates have no label2
    block and carry their value right after the first blank.
    """
    step, entry = state.step, state.entry

    if step is Step.SEEKING_DATE:
        if is_date_token(fragment):
            date = EntryDate(day=parse_date_part(fragment[:2]), month=parse_date_part(fragment[3:]))
            return ScanState(Step.SKIP_FILLER, PartialEntry(date=date)), None
        return state, None

    assert entry is not None, f'No entry in progress at {step}'

    if step is Step.SKIP_FILLER:
        return ScanState(Step.START_LABEL1, entry), None

    if step is Step.START_LABEL1:
        return ScanState(Step.CONTINUE_LABEL1, replace(entry, label1=fragment)), None

    if step is Step.CONTINUE_LABEL1:
        if fragment.strip():
            return ScanState(step, replace(entry, label1=entry.label1 + ' ' + fragment)), None
        return ScanState(Step.BRANCH, entry), None

    if step is Step.BRANCH:
        if is_cheque(entry.label1):
            label1, label2 = split_cheque_label(entry.label1)
            return INITIAL_STATE, _complete(entry, fragment, label1=label1, label2=label2, is_credit=False)
        if is_agios_rebate(entry.label1):
            return INITIAL_STATE, _complete(entry, fragment, label2='', is_credit=True)
        return ScanState(Step.CONTINUE_LABEL2, replace(entry, label2=fragment)), None

    if step is Step.CONTINUE_LABEL2:
        if fragment.strip():
            return ScanState(step, replace(entry, label2=entry.label2 + ' ' + fragment)), None
        return ScanState(Step.VALUE, entry), None

    if step is Step.VALUE:
        return INITIAL_STATE, _complete(entry, fragment, is_credit=is_credit_label(entry.label1))

    raise ValueError(f'Unknown step {step}')


class EntryReconstructor:
    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.state = INITIAL_STATE

    def feed(self, fragment: str) -> PartialEntry | None:
        self.logger.debug('[%s] %r', self.state.step.name, fragment)
        self.state, entry = advance(self.state, fragment)
        if entry is not None:
            self.logger.debug('[T] %s', entry)
        return entry

    def scan(self, fragments: Iterable[str]) -> list[PartialEntry]:
        entries = []
        for fragment in fragments:
            entry = self.feed(fragment)
            if entry is not None:
                entries.append(entry)

        if self.state.entry is not None:
            self.logger.debug('Discarding unfinished entry %s', self.state.entry)
        self.state = INITIAL_STATE
        return entries
