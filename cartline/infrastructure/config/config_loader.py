"""設定の読み込みを行うサービス"""
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from cartline.domain.value_objects.application_config import ApplicationConfig
from cartline.domain.value_objects.identity_hasher import KeyOrder, is_supported_algorithm


class ConfigLoader:
    """環境変数から設定を読み込むサービス"""

    def __init__(self, project_root: Path) -> None:
        """初期化

        Args:
            project_root: プロジェクトルートディレクトリ
        """
        self.project_root = project_root
        self.logger = logging.getLogger(__name__)

    def load_config(self) -> ApplicationConfig:
        """アプリケーション設定を読み込む

        Returns:
            ApplicationConfig: アプリケーション設定

        Raises:
            ValueError: 設定値が無効な場合
        """
        load_dotenv(self.project_root / ".env")

        log_level = os.getenv("CARTLINE_LOG_LEVEL", "INFO")

        # ハッシュアルゴリズムの取得とバリデーション
        id_hash_algorithm = self._parse_id_hash_algorithm(
            os.getenv("CARTLINE_ID_HASH_ALGORITHM")
        )

        # キー順序の取得とバリデーション
        id_key_order = self._parse_id_key_order(
            os.getenv("CARTLINE_ID_KEY_ORDER")
        )

        try:
            config = ApplicationConfig(
                log_level=log_level,
                id_hash_algorithm=id_hash_algorithm,
                id_key_order=id_key_order,
            )
        except ValueError as e:
            raise ValueError(f"設定値が無効です: {str(e)}")

        self.logger.info(
            "設定を読み込みました",
            extra={
                "context": {
                    "id_hash_algorithm": config.id_hash_algorithm,
                    "id_key_order": config.id_key_order,
                }
            },
        )
        return config

    def _parse_id_hash_algorithm(self, value: Optional[str]) -> str:
        """ハッシュアルゴリズムをパースする

        Args:
            value: 環境変数の値

        Returns:
            str: パースされた値、無効な場合は既定値
        """
        if not value:
            return "sha1"

        name = value.strip().lower()
        if not is_supported_algorithm(name):
            self.logger.warning(
                f"CARTLINE_ID_HASH_ALGORITHM の値が無効です: {value}。sha1 を使用します。"
            )
            return "sha1"

        return name

    def _parse_id_key_order(self, value: Optional[str]) -> str:
        """キー順序をパースする

        Args:
            value: 環境変数の値

        Returns:
            str: パースされた値、無効な場合は既定値
        """
        if not value:
            return KeyOrder.SORTED

        order = value.strip().lower()
        valid_orders = [KeyOrder.SORTED, KeyOrder.INSERTION]
        if order not in valid_orders:
            self.logger.warning(
                f"CARTLINE_ID_KEY_ORDER の値が無効です: {value}。{KeyOrder.SORTED} を使用します。"
            )
            return KeyOrder.SORTED

        return order
