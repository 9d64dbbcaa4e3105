"""
アカウントディレクトリ
アカウントIDからアカウントレコードへの対応（CRUDのみ）
"""

from collections.abc import Iterator

from ...core.exceptions import AccountAlreadyExistsError, UnknownAccountError
from ..models.account import Account


class AccountDirectory:
    """アカウントIDをキーにしたレコード管理"""

    def __init__(self):
        self._accounts: dict[str, Account] = {}

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(list(self._accounts.values()))

    def exists(self, account_id: str) -> bool:
        return account_id in self._accounts

    def get(self, account_id: str) -> Account:
        account = self._accounts.get(account_id)
        if account is None:
            raise UnknownAccountError(account_id)
        return account

    def create(self, account: Account) -> Account:
        if account.account_id in self._accounts:
            raise AccountAlreadyExistsError(account.account_id)
        self._accounts[account.account_id] = account
        return account

    def delete(self, account_id: str) -> bool:
        return self._accounts.pop(account_id, None) is not None

    def ids(self) -> list[str]:
        return list(self._accounts)

    def clear(self) -> None:
        self._accounts.clear()
