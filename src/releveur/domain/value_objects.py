from dataclasses import dataclass, field


class StatementError(Exception):
    pass


@dataclass(frozen=True)
class EntryDate:
    day: int | None
    month: int | None
    year: int | None = None

    @property
    def is_valid(self) -> bool:
        return self.day is not None and self.month is not None

    def __str__(self) -> str:
        day = 'NaN' if self.day is None else self.day
        month = 'NaN' if self.month is None else self.month
        return f'{self.year}-{month}-{day}'


@dataclass(frozen=True)
class PartialEntry:
    date: EntryDate
    label1: str = ''
    label2: str | None = None
    value: float | None = None
    value_raw: str | None = None
    is_credit: bool | None = None
    parse_error: bool = False


@dataclass
class Transaction:
    account: str
    date: str
    label1: str
    label2: str
    value: float
    is_credit: bool
    value_raw: str | None = None
    parse_error: bool = False
    category1: str | None = None
    category2: str | None = None

    @property
    def is_categorized(self) -> bool:
        return self.category1 is not None


@dataclass(frozen=True)
class StatementContext:
    file: str
    account: str
    year: int
    month: int


@dataclass(frozen=True)
class Balance:
    credit: float
    debit: float


@dataclass
class StatementResult:
    context: StatementContext
    transactions: list[Transaction]
    balance: Balance
    warnings: list[str] = field(default_factory=list)


@dataclass
class RunResult:
    statements: list[StatementResult] = field(default_factory=list)
    uncategorized: list[Transaction] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def transactions(self) -> list[Transaction]:
        return [tx for statement in self.statements for tx in statement.transactions]

    @property
    def uncategorized_count(self) -> int:
        return len(self.uncategorized)
