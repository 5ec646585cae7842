"""フィールド名からアクセサ名を導出するユーティリティ"""
import re

_WORD_BOUNDARY = re.compile(r"[ _-]")


def classify(word: str) -> str:
    """フィールド名をクラス名形式に変換する

    区切り文字（スペース、アンダースコア、ハイフン）で分割し、
    各単語の先頭文字のみを大文字にして連結する。

    Args:
        word: フィールド名（例: "unit_price", "unit-price"）

    Returns:
        str: 変換後の名前（例: "UnitPrice"）
    """
    return "".join(part[:1].upper() + part[1:] for part in _WORD_BOUNDARY.split(word))
