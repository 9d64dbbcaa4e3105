"""
アカウントモデル
ログインID・表示名・認証情報・プロフィール属性
"""

import hashlib
from dataclasses import dataclass, field
from typing import Any


def hash_password(password: str) -> str:
    """パスワードのハッシュ値を計算"""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


@dataclass
class Account:
    """
    アカウント

    account_id はログインIDで不変。name と attributes のみ変更される。
    """

    account_id: str
    name: str
    password_hash: str
    attributes: dict[str, str] = field(default_factory=dict)

    @classmethod
    def create(cls, account_id: str, password: str, name: str) -> "Account":
        return cls(account_id=account_id, name=name, password_hash=hash_password(password))

    def check_password(self, password: str) -> bool:
        return self.password_hash == hash_password(password)

    def to_dict(self) -> dict[str, Any]:
        return {
            "account_id": self.account_id,
            "name": self.name,
            "password_hash": self.password_hash,
            "attributes": dict(self.attributes),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Account":
        return cls(
            account_id=data["account_id"],
            name=data.get("name", ""),
            password_hash=data["password_hash"],
            attributes=dict(data.get("attributes", {})),
        )
