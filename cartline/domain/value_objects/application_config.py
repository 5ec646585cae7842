"""アプリケーション設定を表す値オブジェクト"""
from pydantic import BaseModel, Field, field_validator

from cartline.domain.value_objects.identity_hasher import KeyOrder, is_supported_algorithm


class ApplicationConfig(BaseModel):
    """アプリケーション設定の値オブジェクト"""

    # ログ設定
    log_level: str = Field(default="INFO", description="ログレベル")

    # ID計算設定
    id_hash_algorithm: str = Field(default="sha1", description="IDのハッシュアルゴリズム")
    id_key_order: str = Field(default=KeyOrder.SORTED, description="IDのキー順序")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """ログレベルのバリデーション"""
        return v.upper()

    @field_validator("id_hash_algorithm")
    @classmethod
    def validate_id_hash_algorithm(cls, v: str) -> str:
        """ハッシュアルゴリズムのバリデーション"""
        if not is_supported_algorithm(v):
            raise ValueError(f"ハッシュアルゴリズムが無効です: {v}")
        return v.lower()

    @field_validator("id_key_order")
    @classmethod
    def validate_id_key_order(cls, v: str) -> str:
        """キー順序のバリデーション"""
        valid_orders = [KeyOrder.SORTED, KeyOrder.INSERTION]
        if v not in valid_orders:
            raise ValueError(f"キー順序は {valid_orders} のいずれかである必要があります")
        return v

    class Config:
        frozen = True
