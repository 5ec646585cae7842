"""カートアイテムIDのハッシュ方式を表す値オブジェクト"""
import dataclasses
import hashlib
import json
from collections.abc import Mapping as MappingABC
from typing import Any, Literal, Mapping

from pydantic import BaseModel, Field, field_validator
from pydantic_core import to_jsonable_python

_JSON_NATIVE_TYPES = (str, int, float, bool, type(None))


class KeyOrder:
    """シリアライズ時のキー順序の定数"""
    SORTED = "sorted"
    INSERTION = "insertion"


def is_supported_algorithm(name: str) -> bool:
    """IDの計算に使えるハッシュアルゴリズムかを判定する

    hashlibで利用でき、出力長が固定のアルゴリズムのみ使える。
    """
    name = name.lower()
    return name in hashlib.algorithms_available and not name.startswith("shake_")


def _type_name(value: Any) -> str:
    value_type = type(value)
    return f"{value_type.__module__}.{value_type.__qualname__}"


def _fallback(value: Any) -> str:
    """JSONに変換できない値を型名付きの文字列で表現する"""
    return f"{_type_name(value)}:{value!r}"


def _dumps(value: Any, sort_keys: bool) -> str:
    return json.dumps(value, sort_keys=sort_keys, separators=(",", ":"), ensure_ascii=False)


def _tagged(value: Any, inner: Any) -> dict:
    return {"__type__": _type_name(value), "value": inner}


def _canonicalize(value: Any) -> Any:
    """値を型情報付きの決定的なJSON互換の形に変換する

    str・int・float・bool・None・dict・listはそのまま、それ以外の型は
    {"__type__": 型名, "value": 値} の形にする。set・frozensetの要素は
    プロセスごとのハッシュ値に依存しないよう並べ替える。
    """
    value_type = type(value)
    if value_type in _JSON_NATIVE_TYPES:
        return value
    if value_type is dict:
        return {key: _canonicalize(item) for key, item in value.items()}
    if value_type is list:
        return [_canonicalize(item) for item in value]
    if isinstance(value, (set, frozenset)):
        items = [_canonicalize(item) for item in value]
        return _tagged(value, sorted(items, key=lambda item: _dumps(item, sort_keys=True)))
    if isinstance(value, MappingABC):
        return _tagged(value, {key: _canonicalize(item) for key, item in value.items()})
    if isinstance(value, tuple):
        return _tagged(value, [_canonicalize(item) for item in value])
    if isinstance(value, BaseModel):
        return _tagged(value, {name: _canonicalize(item) for name, item in value})
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        fields = {
            field.name: _canonicalize(getattr(value, field.name))
            for field in dataclasses.fields(value)
        }
        return _tagged(value, fields)
    return _tagged(value, _canonicalize(to_jsonable_python(value, fallback=_fallback)))


class IdentityHasher(BaseModel):
    """属性マッピングから決定的なダイジェストを計算する値オブジェクト"""

    algorithm: str = Field(default="sha1", description="hashlibのアルゴリズム名")
    key_order: Literal["sorted", "insertion"] = Field(
        default=KeyOrder.SORTED, description="シリアライズ時のキー順序"
    )

    @field_validator("algorithm")
    @classmethod
    def validate_algorithm(cls, v: str) -> str:
        """アルゴリズム名のバリデーション"""
        if not is_supported_algorithm(v):
            raise ValueError(f"unsupported hash algorithm: {v}")
        return v.lower()

    def serialize(self, attributes: Mapping[str, Any]) -> bytes:
        """属性マッピングをバイト列にシリアライズする

        Args:
            attributes: ハッシュ対象の属性

        Returns:
            bytes: UTF-8エンコードされたコンパクトなJSON
        """
        payload = {key: _canonicalize(value) for key, value in attributes.items()}
        text = _dumps(payload, sort_keys=self.key_order == KeyOrder.SORTED)
        return text.encode("utf-8")

    def digest(self, attributes: Mapping[str, Any]) -> str:
        """属性マッピングの16進ダイジェストを返す

        Args:
            attributes: ハッシュ対象の属性

        Returns:
            str: 16進文字列のダイジェスト
        """
        return hashlib.new(self.algorithm, self.serialize(attributes)).hexdigest()

    class Config:
        frozen = True
