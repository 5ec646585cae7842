"""配列表現に変換できるオブジェクトのインターフェース"""
from abc import ABC, abstractmethod
from typing import Any, Dict


class IArrayable(ABC):
    """配列表現に変換できるオブジェクトのインターフェース"""

    @abstractmethod
    def to_array(self) -> Dict[str, Any]:
        """永続化・転送用のスナップショットを返す

        Returns:
            Dict[str, Any]: スナップショット
        """
        pass
