"""pytest共通設定"""
import logging
from typing import Any, Dict

import pytest

from cartline.domain.entities.cart_item import CartItem
from cartline.infrastructure.logging.json_formatter import JSONFormatter

CONFIG_ENV_VARS = (
    "CARTLINE_LOG_LEVEL",
    "CARTLINE_ID_HASH_ALGORITHM",
    "CARTLINE_ID_KEY_ORDER",
)


@pytest.fixture
def sample_attributes() -> Dict[str, Any]:
    """テスト用の属性"""
    return {
        "sku": "TSHIRT-001",
        "name": "Tシャツ",
        "price": 10.0,
        "tax": 1.0,
        "quantity": 2,
        "options": {"size": "M", "color": "red"},
    }


@pytest.fixture
def cart_item(sample_attributes: Dict[str, Any]) -> CartItem:
    """テスト用のカートアイテム"""
    return CartItem(sample_attributes)


@pytest.fixture
def clean_env(monkeypatch):
    """設定用の環境変数を未設定にする（.envから読み込んだ値もテスト後に消える）"""
    for name in CONFIG_ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def restore_root_logger():
    """ルートロガーのレベルをテスト後に戻し、追加したJSONハンドラーを外す"""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler.formatter, JSONFormatter):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
