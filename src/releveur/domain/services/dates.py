from releveur.domain import EntryDate


def resolve_year(entry_month: int | None, statement_year: int, statement_month: int) -> int:
    """Year of an entry on a statement whose period may straddle New Year."""
    if entry_month == 12 and statement_month == 1:
        return statement_year - 1
    if entry_month == 1 and statement_month == 12:
        return statement_year + 1
    return statement_year


def resolve_date(entry_date: EntryDate, statement_year: int, statement_month: int) -> EntryDate:
    year = resolve_year(entry_date.month, statement_year, statement_month)
    return EntryDate(day=entry_date.day, month=entry_date.month, year=year)
