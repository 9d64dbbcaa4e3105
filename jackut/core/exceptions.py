"""
カスタム例外クラス
階層的な例外処理によるエラーハンドリングの統一

メッセージ本文は既存クライアント互換のため Jackut 本来の文言を維持する。
"""

from typing import Any


class JackutException(Exception):
    """Jackutアプリケーションのベース例外クラス"""

    def __init__(self, message: str, error_code: str | None = None,
                 details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class DatabaseError(JackutException):
    """永続化関連のエラー"""


class PersistenceError(DatabaseError):
    """スナップショット保存・読み込みの失敗"""


class AuthenticationError(JackutException):
    """認証・認可エラー"""


class ValidationError(JackutException):
    """バリデーションエラー"""

    def __init__(self, message: str, field: str | None = None,
                 value: Any | None = None, **kwargs):
        super().__init__(message, **kwargs)
        if field:
            self.details['field'] = field
        if value is not None:
            self.details['value'] = value


class BusinessLogicError(JackutException):
    """ビジネスロジック関連のエラー"""


# === アカウント・セッション ===


class InvalidLoginError(ValidationError):
    def __init__(self, message: str = "Login inválido.", **kwargs):
        super().__init__(message, field="login", **kwargs)


class InvalidPasswordError(ValidationError):
    def __init__(self, message: str = "Senha inválida.", **kwargs):
        super().__init__(message, field="password", **kwargs)


class InvalidCredentialsError(AuthenticationError):
    def __init__(self, message: str = "Login ou senha inválidos.", **kwargs):
        super().__init__(message, **kwargs)


class UnknownSessionError(AuthenticationError):
    """セッションハンドルが解決できない"""

    def __init__(self, session_id: str | None = None, **kwargs):
        super().__init__("Sessão inválida.", **kwargs)
        if session_id:
            self.details['session_id'] = session_id


class AccountError(BusinessLogicError):
    """アカウント関連のエラー"""

    def __init__(self, message: str, account_id: str | None = None, **kwargs):
        super().__init__(message, **kwargs)
        if account_id:
            self.details['account_id'] = account_id


class UnknownAccountError(AccountError):
    def __init__(self, account_id: str | None = None, **kwargs):
        super().__init__("Usuário não cadastrado.", account_id=account_id, **kwargs)


class AccountAlreadyExistsError(AccountError):
    def __init__(self, account_id: str | None = None, **kwargs):
        super().__init__("Conta com esse nome já existe.", account_id=account_id, **kwargs)


class AttributeNotFilledError(AccountError):
    def __init__(self, attribute: str, account_id: str | None = None, **kwargs):
        super().__init__("Atributo não preenchido.", account_id=account_id, **kwargs)
        self.details['attribute'] = attribute


# === 関係性 ===


class RelationshipError(BusinessLogicError):
    """関係性の遷移ルール違反"""

    def __init__(self, message: str, actor: str | None = None,
                 target: str | None = None, **kwargs):
        super().__init__(message, **kwargs)
        if actor:
            self.details['actor'] = actor
        if target:
            self.details['target'] = target


_SELF_RELATION_MESSAGES = {
    "friend": "Usuário não pode adicionar a si mesmo como amigo.",
    "idol": "Usuário não pode ser fã de si mesmo.",
    "crush": "Usuário não pode ser paquera de si mesmo.",
    "enemy": "Usuário não pode ser inimigo de si mesmo.",
}

_ALREADY_DECLARED_MESSAGES = {
    "idol": "Usuário já está adicionado como ídolo.",
    "crush": "Usuário já está adicionado como paquera.",
    "enemy": "Usuário já está adicionado como inimigo.",
}


class SelfRelationError(RelationshipError):
    def __init__(self, kind: str, actor: str | None = None, **kwargs):
        super().__init__(_SELF_RELATION_MESSAGES[kind], actor=actor, **kwargs)
        self.details['kind'] = kind


class AlreadyFriendsError(RelationshipError):
    def __init__(self, **kwargs):
        super().__init__("Usuário já está adicionado como amigo.", **kwargs)


class RequestAlreadyPendingError(RelationshipError):
    def __init__(self, **kwargs):
        super().__init__(
            "Usuário já está adicionado como amigo, esperando aceitação do convite.",
            **kwargs,
        )


class AlreadyDeclaredError(RelationshipError):
    def __init__(self, kind: str, **kwargs):
        super().__init__(_ALREADY_DECLARED_MESSAGES[kind], **kwargs)
        self.details['kind'] = kind


class InteractionBlockedError(RelationshipError):
    """どちらかが相手を敵として登録している"""

    def __init__(self, enemy_name: str, **kwargs):
        super().__init__(f"Função inválida: {enemy_name} é seu inimigo.", **kwargs)


# === メッセージ ===


class MessageError(BusinessLogicError):
    """メッセージ関連のエラー"""


class NoMessagesError(MessageError):
    def __init__(self, message: str = "Não há mensagens.", **kwargs):
        super().__init__(message, **kwargs)


class SelfMessageError(MessageError):
    def __init__(self, **kwargs):
        super().__init__("Usuário não pode enviar recado para si mesmo.", **kwargs)


# === コミュニティ ===


class CommunityError(BusinessLogicError):
    """コミュニティ関連のエラー"""

    def __init__(self, message: str, community: str | None = None, **kwargs):
        super().__init__(message, **kwargs)
        if community:
            self.details['community'] = community


class UnknownCommunityError(CommunityError):
    def __init__(self, community: str | None = None, **kwargs):
        super().__init__("Comunidade não existe.", community=community, **kwargs)


class DuplicateNameError(CommunityError):
    def __init__(self, community: str | None = None, **kwargs):
        super().__init__("Comunidade com esse nome já existe.", community=community, **kwargs)


class AlreadyMemberError(CommunityError):
    def __init__(self, community: str | None = None, **kwargs):
        super().__init__("Usuario já faz parte dessa comunidade.", community=community, **kwargs)


class SenderNotMemberError(CommunityError):
    def __init__(self, community: str | None = None, **kwargs):
        super().__init__("Usuário não é membro da comunidade.", community=community, **kwargs)
