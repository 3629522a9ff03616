import math
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from releveur.domain import Balance, Transaction


CENT = Decimal('0.01')


def round_cents(amount: float) -> float:
    # repr() keeps 10.005 as 10.005 instead of its binary expansion 10.00499...
    if math.isnan(amount):
        return amount
    return float(Decimal(repr(amount)).quantize(CENT, rounding=ROUND_HALF_UP))


def compute_balance(transactions: Iterable[Transaction]) -> Balance:
    credit = 0.0
    debit = 0.0
    for tx in transactions:
        if tx.is_credit:
            credit += tx.value
        else:
            debit += tx.value
    return Balance(credit=round_cents(credit), debit=round_cents(debit))
