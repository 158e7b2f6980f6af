import os
import logging
import logging.config
from pathlib import Path
from typing import Any, Dict

import yaml


def resolve_log_dir() -> Path:
    """Resolve the directory used for log files.

    Prefers `LOG_DIR`, then `DATAPORT_LOG_DIR`, falling back to ``./logs``.
    """
    for raw in (os.getenv("LOG_DIR"), os.getenv("DATAPORT_LOG_DIR")):
        if raw:
            return Path(raw).expanduser().resolve()
    return Path("logs").resolve()


def _relocate_file_handlers(config: Dict[str, Any], log_dir: Path) -> None:
    # every handler writing to a file keeps its basename but lands in log_dir
    for handler in (config.get("handlers") or {}).values():
        if isinstance(handler, dict) and "filename" in handler:
            log_dir.mkdir(parents=True, exist_ok=True)
            handler["filename"] = str(log_dir / Path(handler["filename"]).name)


def setup_logging(
    default_path="logging_config.yaml",
    default_level=logging.INFO,
    env_key="LOG_CFG",
) -> bool:
    """
    Configure logging for routing code.

    The YAML file named by ``env_key`` (or ``default_path``) is fed to
    ``logging.config.dictConfig``. Without it, ``basicConfig`` is used.
    Returns True when the YAML configuration was applied.
    """
    path = Path(os.getenv(env_key, default_path))
    if not path.is_file():
        logging.basicConfig(level=default_level)
        return False

    with path.open("rt", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    _relocate_file_handlers(config, resolve_log_dir())
    logging.config.dictConfig(config)
    return True
