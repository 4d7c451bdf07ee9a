class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ValidationException(DomainException):
    """入力値が不正な場合（必須項目の欠落・同乗者情報の不整合・不正な金額など）

    呼び出し元に理由を返す。リトライはしない。
    """

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（ステータスが期待値と異なる場合）"""

    pass


class ExternalServiceException(DomainException):
    """外部サービス（決済ゲートウェイ・経路検索など）の呼び出しに失敗した場合"""

    pass
