import math
import re


CHEQUE_PREFIX = 'CHEQUE'
AGIOS_REBATE_LABEL = "4 REMISE COMMERCIALE D'AGIOS"

TRANSFER_PREFIX = 'VIREMENT'
OUTGOING_TRANSFER_PREFIX = 'VIREMENT POUR'
CARD_CREDIT_LABEL = 'CREDIT CARTE BANCAIRE'
FEE_THRESHOLD_CREDIT_LABEL = '4 AVANTAGE SEUIL DE NON-PERCEPTION'

# Same leading-number reading as a lenient float parser: trailing junk is ignored.
AMOUNT_PATTERN = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')
DATE_PART_PATTERN = re.compile(r'\s*([+-]?\d+)')


def sanitize_amount(s: str) -> str:
    return s.replace(',', '.').replace(' ', '').replace('\xa0', '').replace('\u202f', '')


def parse_amount(s: str) -> float:
    """Parse a comma-decimal amount such as ``'1 234,56'``.

    Returns NaN when the text does not start with a number.
    """
    m = AMOUNT_PATTERN.match(sanitize_amount(s))
    if m is None:
        return math.nan
    return float(m.group(0))


def is_date_token(s: str) -> bool:
    return len(s) == 5 and s[2] == '/'


def parse_date_part(s: str) -> int | None:
    """Leading integer of a day or month field, ``None`` when there is none."""
    m = DATE_PART_PATTERN.match(s)
    if m is None:
        return None
    return int(m.group(1))


def is_cheque(label1: str) -> bool:
    return label1.startswith(CHEQUE_PREFIX)


def is_agios_rebate(label1: str) -> bool:
    return label1 == AGIOS_REBATE_LABEL


def split_cheque_label(label1: str) -> tuple[str, str]:
    """Split ``'CHEQUE <number> <payee> ...'`` into ``('CHEQUE', '<payee>')``, the third word."""
    parts = label1.split(' ')
    if len(parts) < 3:
        return parts[0], ''
    return parts[0], parts[2]


def is_credit_label(label1: str) -> bool:
    if label1.startswith(TRANSFER_PREFIX) and not label1.startswith(OUTGOING_TRANSFER_PREFIX):
        return True
    if label1 == CARD_CREDIT_LABEL:
        return True
    if label1 == FEE_THRESHOLD_CREDIT_LABEL:
        return True
    return False
