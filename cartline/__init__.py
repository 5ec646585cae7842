"""ショッピングカートの明細行（カートアイテム）"""
from cartline.domain.entities.cart_item import CartItem, field_getter, field_setter
from cartline.domain.exceptions import AttributeNotFoundError, CartItemError, InvalidArgumentError
from cartline.domain.value_objects.identity_hasher import IdentityHasher

__all__ = [
    "CartItem",
    "field_getter",
    "field_setter",
    "CartItemError",
    "InvalidArgumentError",
    "AttributeNotFoundError",
    "IdentityHasher",
]
