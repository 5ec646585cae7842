"""カートアイテムの利用例"""
import logging
from pathlib import Path

from cartline.infrastructure.config.config_loader import ConfigLoader
from cartline.infrastructure.logging.logging_setup import LoggingSetup
from cartline.infrastructure.services.cart_item_factory import CartItemFactory

project_root = Path(__file__).parent.parent


def main() -> None:
    """メイン処理"""
    config = ConfigLoader(project_root).load_config()
    LoggingSetup.setup(config.log_level, project_root)
    logger = logging.getLogger(__name__)

    factory = CartItemFactory.from_config(config)
    item = factory.create({"sku": "TSHIRT-001", "name": "Tシャツ", "price": "1980", "tax": 198})

    logger.info("カートアイテム", extra={"context": item.to_array()})

    # 数量を変えてもIDは変わらない
    before = item.id
    item.quantity = 3
    logger.info(f"数量変更後もIDが同じか: {item.id == before}")

    logger.info(
        "合計金額",
        extra={
            "context": {
                "total_price": item.total_price,
                "total_price_excluding_tax": item.total_price_excluding_tax,
                "total_tax": item.total_tax,
            }
        },
    )

    restored = factory.restore(item.to_array())
    logger.info(f"復元したアイテムのID: {restored.id}")


if __name__ == "__main__":
    main()
