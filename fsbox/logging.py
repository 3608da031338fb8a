# fsbox/logging.py
import logging
import os
from typing import Any, Dict, Optional


def configure_logging(level: Optional[str] = None):
    logging.basicConfig(
        level=level or os.getenv("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def summarize_items(value: Any, key: Optional[str] = None) -> Any:
    """
    Make operation arguments safe to log: file content is replaced by its
    length (or a stream marker), everything else is passed through.
    """
    if hasattr(value, "model_dump"):
        value = value.model_dump()
    if isinstance(value, dict):
        return {k: summarize_items(v, k) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [summarize_items(v) for v in value]
    if key == "content" and value is not None:
        if isinstance(value, str):
            return f"<{len(value)} chars>"
        if isinstance(value, (bytes, bytearray)):
            return f"<{len(value)} bytes>"
        return "<stream>"
    if hasattr(value, "__next__"):
        # a one-shot iterator must not be consumed by logging
        return "<iterator>"
    return value


def log_operation(logger: logging.Logger, name: str, args: Dict[str, Any]):
    if logger.isEnabledFor(logging.INFO):
        logger.info("op=%s %s", name, summarize_items(args))
