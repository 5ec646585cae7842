import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from cartline.infrastructure.logging.json_formatter import JSONFormatter, get_version


class LoggingSetup:

    @staticmethod
    def setup(log_level: str, project_root: Path, log_dir: Optional[Path] = None) -> Optional[Path]:
        level = getattr(logging, log_level.upper(), logging.INFO)

        version = get_version(project_root)
        formatter = JSONFormatter(version=version)

        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        handlers: list[logging.Handler] = [stream_handler]

        # ログディレクトリが指定された場合のみファイルにも出力する
        log_file = None
        if log_dir is not None:
            log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = log_dir / f"cartline_{timestamp}.log"

            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)

        logging.basicConfig(
            level=level,
            handlers=handlers,
            force=True
        )

        logger = logging.getLogger(__name__)
        if log_file is not None:
            logger.info("ログファイルを初期化しました", extra={"context": {"log_file": str(log_file)}})
        return log_file
