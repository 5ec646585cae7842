import json
import logging
import traceback
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

import tomli

DEFAULT_VERSION = "0.1.0"


class JSONFormatter(logging.Formatter):
    def __init__(self, version: str):
        super().__init__()
        self.version = version

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "version": self.version,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "thread": record.threadName,
            "process": record.process,
        }

        context = getattr(record, "context", None)
        if context and isinstance(context, dict):
            log_data["context"] = context

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_data, ensure_ascii=False, default=str)


def get_version(project_root: Path) -> str:
    pyproject_path = project_root / "pyproject.toml"
    if not pyproject_path.exists():
        return DEFAULT_VERSION

    try:
        with open(pyproject_path, "rb") as f:
            data = tomli.load(f)
    except (OSError, tomli.TOMLDecodeError):
        return DEFAULT_VERSION

    version = data.get("project", {}).get("version")
    if version:
        return version
    return data.get("tool", {}).get("poetry", {}).get("version", DEFAULT_VERSION)
