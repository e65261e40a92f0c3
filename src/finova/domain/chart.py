"""Chart of accounts."""

from functools import cached_property
from typing import Iterable, Iterator, Optional

from finova.domain.entities import Account, AccountCategory, AccountType
from finova.domain.errors import (
    ConflictError,
    UnknownAccountError,
    account_not_found,
    duplicate_account_id,
)

BANK = "bank"
OVERDRAFT = "overdraft"
CAPITAL = "capital"
DRAWINGS = "drawings"


class ChartOfAccounts:
    """Ordered, immutable set of accounts.

    Reports iterate accounts in declaration order, so the order given at
    construction is the order rows appear in. Partitions by category and by
    type are computed once per chart.
    """

    def __init__(self, accounts: Iterable[Account]):
        """Initialize the chart.

        Args:
            accounts: Accounts in display order

        Raises:
            ConflictError: If two accounts share an id
        """
        self._accounts: tuple[Account, ...] = tuple(accounts)
        index: dict[str, Account] = {}
        for account in self._accounts:
            if account.id in index:
                raise ConflictError(duplicate_account_id(account.id))
            index[account.id] = account
        self._index = index

    def __iter__(self) -> Iterator[Account]:
        return iter(self._accounts)

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._index

    @property
    def accounts(self) -> tuple[Account, ...]:
        return self._accounts

    def get(self, account_id: str) -> Optional[Account]:
        """Get account by id, or None if the chart does not declare it."""
        return self._index.get(account_id)

    def require(self, account_id: str) -> Account:
        """Get account by id.

        Raises:
            UnknownAccountError: If the chart does not declare the id
        """
        account = self._index.get(account_id)
        if account is None:
            raise UnknownAccountError(account_not_found(account_id))
        return account

    def name_of(self, account_id: str) -> str:
        """Return the display name, falling back to the raw id."""
        account = self._index.get(account_id)
        return account.name if account is not None else account_id

    @cached_property
    def _by_category(self) -> dict[AccountCategory, tuple[Account, ...]]:
        return {
            category: tuple(a for a in self._accounts if a.category == category)
            for category in AccountCategory
        }

    @cached_property
    def _by_type(self) -> dict[AccountType, tuple[Account, ...]]:
        return {
            account_type: tuple(
                a for a in self._accounts if a.account_type == account_type
            )
            for account_type in AccountType
        }

    def by_category(self, *categories: AccountCategory) -> tuple[Account, ...]:
        """Return accounts in any of the given categories, in chart order."""
        if len(categories) == 1:
            return self._by_category[categories[0]]
        wanted = set(categories)
        return tuple(a for a in self._accounts if a.category in wanted)

    def by_type(self, account_type: AccountType) -> tuple[Account, ...]:
        """Return accounts of the given type, in chart order."""
        return self._by_type[account_type]

    @cached_property
    def profit_accounts(self) -> tuple[Account, ...]:
        """Accounts feeding net profit (trading and P&L categories)."""
        return self.by_category(AccountCategory.TRADING, AccountCategory.PL)

    def selectable(self) -> tuple[Account, ...]:
        """Return accounts offered for entry selection (hidden ones excluded)."""
        return tuple(a for a in self._accounts if not a.hidden)


def _account(
    account_id: str,
    name: str,
    account_type: AccountType,
    category: AccountCategory,
    hidden: bool = False,
) -> Account:
    return Account(
        id=account_id,
        name=name,
        account_type=account_type,
        category=category,
        hidden=hidden,
    )


_A = AccountType.ASSET
_L = AccountType.LIABILITY
_R = AccountType.REVENUE
_E = AccountType.EXPENSE
_BS = AccountCategory.BALANCE_SHEET
_TR = AccountCategory.TRADING
_PL = AccountCategory.PL

DEFAULT_ACCOUNTS: tuple[Account, ...] = (
    # Assets
    _account("cash", "Cash", _A, _BS),
    _account(BANK, "Bank", _A, _BS),
    _account(OVERDRAFT, "Bank Overdraft", _L, _BS, hidden=True),
    _account("inventory", "Inventory", _A, _TR),
    _account("accounts-receivable", "Accounts Receivable", _A, _BS),
    # Liabilities & capital
    _account(CAPITAL, "Owner's Capital", _L, _BS),
    _account("accounts-payable", "Accounts Payable", _L, _BS),
    _account("bank-loan", "Bank Loan", _L, _BS),
    _account(DRAWINGS, "Drawings", _L, _BS),
    # Trading
    _account("sales", "Sales", _R, _TR),
    _account("sales-return", "Sales Return", _R, _TR),
    _account("purchases", "Purchases", _E, _TR),
    _account("purchase-return", "Purchase Return", _E, _TR),
    _account("direct-expenses", "Direct Expenses", _E, _TR),
    # Profit & loss
    _account("indirect-income", "Other Income", _R, _PL),
    _account("rent-expense", "Rent Expense", _E, _PL),
    _account("salary-expense", "Salary Expense", _E, _PL),
    _account("utility-expense", "Utility Expense", _E, _PL),
    _account("miscellanous-expense", "Misc Expenses", _E, _PL),
)

DEFAULT_CHART = ChartOfAccounts(DEFAULT_ACCOUNTS)
