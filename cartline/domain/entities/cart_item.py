"""カートアイテムエンティティ"""
import numbers
import re
from decimal import Decimal
from typing import Any, Callable, ClassVar, Dict, List, Mapping, Optional

from cartline.domain.exceptions import AttributeNotFoundError, InvalidArgumentError
from cartline.domain.interfaces.arrayable import IArrayable
from cartline.domain.services.inflector import classify
from cartline.domain.value_objects.identity_hasher import IdentityHasher

# 前後の空白・符号・小数点・指数を許可する。16進数・nan・infは数値とみなさない
_NUMERIC_STRING = re.compile(
    r"^[ \t\n\r\v\f]*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?[ \t\n\r\v\f]*$"
)


def field_getter(name: str) -> Callable:
    """プロパティ形式の読み取りに使うゲッターとして登録する"""
    def decorator(func: Callable) -> Callable:
        func.__field_getter__ = name
        return func
    return decorator


def field_setter(name: str) -> Callable:
    """プロパティ形式の書き込みに使うセッターとして登録する"""
    def decorator(func: Callable) -> Callable:
        func.__field_setter__ = name
        return func
    return decorator


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (numbers.Real, Decimal)):
        return True
    if isinstance(value, str):
        return _NUMERIC_STRING.match(value) is not None
    return False


class CartItem(IArrayable):
    """カート内の1行（商品と数量の組）を表すエンティティ

    任意の属性を保持し、quantity・price・taxの3つの予約フィールドだけは
    型チェックと型変換を行う。IDはquantity以外の全属性から計算されるため、
    数量が異なるだけのアイテムは同じIDを持つ。

    属性には3通りの方法でアクセスできる:
        - 汎用メソッド: ``item.get("sku")`` / ``item.set("sku", "A-1")``
        - 添字: ``item["sku"]`` / ``item["sku"] = "A-1"``
        - プロパティ形式: ``item.sku`` / ``item.sku = "A-1"``

    プロパティ形式では、フィールド名に対応するゲッター・セッターが
    登録されていればそれを優先し、なければ汎用メソッドにフォールバックする。
    メソッド名やクラス属性と同じ名前の属性はプロパティ形式では読めない。
    """

    defaults: ClassVar[Dict[str, Any]] = {
        "quantity": 1,
        "price": 0.00,
        "tax": 0.00,
    }
    hasher: ClassVar[IdentityHasher] = IdentityHasher()

    _getters: ClassVar[Dict[str, str]] = {}
    _setters: ClassVar[Dict[str, str]] = {}

    def __init__(
        self,
        attributes: Optional[Mapping[str, Any]] = None,
        *,
        hasher: Optional[IdentityHasher] = None,
    ) -> None:
        """初期化

        Args:
            attributes: 初期属性。予約フィールドの既定値を上書きする
            hasher: ID計算に使うハッシュ方式。省略時はクラスの既定値

        Raises:
            InvalidArgumentError: 予約フィールドの値が不正な場合
        """
        self._data: Dict[str, Any] = {}
        self._hasher = hasher if hasher is not None else self.hasher

        data = dict(self.defaults)
        data.update(attributes or {})

        for key, value in data.items():
            self.write(key, value)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._collect_accessors()

    @classmethod
    def _collect_accessors(cls) -> None:
        """デコレータで登録されたゲッター・セッターをディスパッチ表にまとめる"""
        getters: Dict[str, str] = {}
        setters: Dict[str, str] = {}
        for klass in reversed(cls.__mro__):
            for attr_name, member in vars(klass).items():
                name = getattr(member, "__field_getter__", None)
                if name is not None:
                    getters[classify(name)] = attr_name
                name = getattr(member, "__field_setter__", None)
                if name is not None:
                    setters[classify(name)] = attr_name
        cls._getters = getters
        cls._setters = setters

    # --- ID ---

    @field_getter("id")
    def get_id(self) -> str:
        """カートアイテムのIDを取得する

        Returns:
            str: quantity以外の属性から計算した16進ダイジェスト
        """
        hash_data = dict(self._data)
        for key in self.omitted_hash_properties():
            hash_data.pop(key, None)
        return self._hasher.digest(hash_data)

    def omitted_hash_properties(self) -> List[str]:
        """ID計算から除外する属性名を取得する"""
        return ["quantity"]

    # --- 汎用アクセサ ---

    def get(self, key: str) -> Any:
        """属性を取得する

        Args:
            key: 属性名。"id"の場合は計算したIDを返す

        Returns:
            Any: 属性値

        Raises:
            AttributeNotFoundError: 属性が設定されていない場合
        """
        if key == "id":
            return self.get_id()
        try:
            return self._data[key]
        except KeyError:
            raise AttributeNotFoundError(key) from None

    def set(self, key: str, value: Any) -> str:
        """属性を設定する

        Args:
            key: 属性名
            value: 属性値

        Returns:
            str: 設定後のID

        Raises:
            InvalidArgumentError: quantityが整数でない、またはprice・taxが数値でない場合
        """
        if key == "quantity":
            self._check_integer(value, key)
        elif key in ("price", "tax"):
            self._check_numeric(value, key)
            value = float(value)

        self._data[key] = value

        return self.get_id()

    def has(self, key: str) -> bool:
        """属性が設定されているかを判定する"""
        return key in self._data

    def unset(self, key: str) -> None:
        """属性を削除する。設定されていない場合は何もしない"""
        self._data.pop(key, None)

    @staticmethod
    def _check_integer(value: Any, name: str) -> None:
        if not _is_integer(value):
            raise InvalidArgumentError(f"{name} must be an integer.")

    @staticmethod
    def _check_numeric(value: Any, name: str) -> None:
        if not _is_numeric(value):
            raise InvalidArgumentError(f"{name} must be numeric.")

    # --- プロパティ形式のアクセス ---

    def read(self, name: str) -> Any:
        """登録済みゲッターを優先して属性を取得する"""
        getter = self._getters.get(classify(name))
        if getter is not None:
            return getattr(self, getter)()
        return self.get(name)

    def write(self, name: str, value: Any) -> None:
        """登録済みセッターを優先して属性を設定する"""
        setter = self._setters.get(classify(name))
        if setter is not None:
            getattr(self, setter)(value)
        else:
            self.set(name, value)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self.read(name)
        except AttributeNotFoundError as e:
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            ) from e

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
        else:
            self.write(name, value)

    def __delattr__(self, name: str) -> None:
        if name.startswith("_"):
            object.__delattr__(self, name)
        else:
            self.unset(name)

    # --- 金額 ---

    @field_getter("total_price")
    def get_total_price(self) -> float:
        """税込の合計金額を取得する"""
        return float((self.read("price") + self.read("tax")) * self.read("quantity"))

    @field_getter("total_price_excluding_tax")
    def get_total_price_excluding_tax(self) -> float:
        """税抜の合計金額を取得する"""
        return float(self.read("price") * self.read("quantity"))

    @field_getter("single_price")
    def get_single_price(self) -> float:
        """税込の単価を取得する"""
        return float(self.read("price") + self.read("tax"))

    @field_getter("single_price_excluding_tax")
    def get_single_price_excluding_tax(self) -> float:
        """税抜の単価を取得する"""
        return float(self.read("price"))

    @field_getter("total_tax")
    def get_total_tax(self) -> float:
        """合計税額を取得する"""
        return float(self.read("tax") * self.read("quantity"))

    @field_getter("single_tax")
    def get_single_tax(self) -> float:
        """単価あたりの税額を取得する"""
        return float(self.read("tax"))

    # --- シリアライズ ---

    def to_array(self) -> Dict[str, Any]:
        """IDと属性のスナップショットを返す

        Returns:
            Dict[str, Any]: {"id": ID, "data": quantityを含む全属性}
        """
        return {
            "id": self.get_id(),
            "data": dict(self._data),
        }

    # --- 添字アクセス ---

    def __contains__(self, key: object) -> bool:
        return self.has(key)

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        self.unset(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.get_id()!r}, data={self._data!r})"


CartItem._collect_accessors()
