"""カートアイテムの生成を行うファクトリ"""
import logging
from typing import Any, Mapping, Optional

from cartline.domain.entities.cart_item import CartItem
from cartline.domain.exceptions import InvalidArgumentError
from cartline.domain.value_objects.application_config import ApplicationConfig
from cartline.domain.value_objects.identity_hasher import IdentityHasher


class CartItemFactory:
    """設定済みのハッシュ方式でカートアイテムを生成するファクトリ"""

    def __init__(
        self,
        hasher: IdentityHasher,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """初期化

        Args:
            hasher: ID計算に使うハッシュ方式
            logger: ロガー
        """
        self.hasher = hasher
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_config(
        cls,
        config: ApplicationConfig,
        logger: Optional[logging.Logger] = None,
    ) -> "CartItemFactory":
        """アプリケーション設定からファクトリを作成する

        Args:
            config: アプリケーション設定
            logger: ロガー

        Returns:
            CartItemFactory: ファクトリ
        """
        hasher = IdentityHasher(
            algorithm=config.id_hash_algorithm,
            key_order=config.id_key_order,
        )
        return cls(hasher=hasher, logger=logger)

    def create(self, attributes: Optional[Mapping[str, Any]] = None) -> CartItem:
        """カートアイテムを作成する

        Args:
            attributes: 初期属性

        Returns:
            CartItem: カートアイテム

        Raises:
            InvalidArgumentError: 予約フィールドの値が不正な場合
        """
        try:
            item = CartItem(attributes, hasher=self.hasher)
        except InvalidArgumentError as e:
            self.logger.warning(f"カートアイテムの作成に失敗しました: {e}")
            raise

        self.logger.debug(
            "カートアイテムを作成しました",
            extra={"context": {"id": item.get_id(), "quantity": item.get("quantity")}},
        )
        return item

    def restore(self, snapshot: Mapping[str, Any]) -> CartItem:
        """to_array() のスナップショットからカートアイテムを復元する

        Args:
            snapshot: {"id": ID, "data": 属性} 形式のスナップショット

        Returns:
            CartItem: 復元したカートアイテム

        Raises:
            ValueError: スナップショットに data が含まれない場合
            InvalidArgumentError: 予約フィールドの値が不正な場合
        """
        data = snapshot.get("data")
        if not isinstance(data, Mapping):
            raise ValueError("スナップショットに data が含まれていません")

        item = self.create(data)

        expected_id = snapshot.get("id")
        if expected_id is not None and expected_id != item.get_id():
            self.logger.warning(
                "復元したカートアイテムのIDがスナップショットと一致しません",
                extra={"context": {"expected": expected_id, "actual": item.get_id()}},
            )

        return item
