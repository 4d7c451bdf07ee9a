from decimal import Decimal, InvalidOperation


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    変換できない値は ValueError とする（Pydantic がバリデーションエラーに変換する）。
    """
    if isinstance(v, Decimal):
        return v
    if isinstance(v, bool):
        raise ValueError(f"Not a number: {v!r}")
    try:
        return Decimal(str(v))
    except InvalidOperation as e:
        raise ValueError(f"Not a number: {v!r}") from e


def is_positive_finite(v: Decimal) -> bool:
    """有限かつ 0 より大きいか（NaN / Infinity は False）"""
    return v.is_finite() and v > 0
