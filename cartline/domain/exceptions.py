"""カートアイテムのドメイン例外"""


class CartItemError(Exception):
    """カートアイテム関連の例外の基底クラス"""


class InvalidArgumentError(CartItemError, ValueError):
    """予約フィールドに不正な値が設定された場合の例外"""


class AttributeNotFoundError(CartItemError, KeyError):
    """設定されていない属性を取得しようとした場合の例外"""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"attribute '{self.key}' is not set."
