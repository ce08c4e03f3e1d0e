import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import Settings, get_settings

# Context variable for the cart currently being priced
cart_id_var: ContextVar[Optional[str]] = ContextVar("cart_id", default=None)

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<magenta>cart_id={extra[cart_id]}</magenta> | <level>{message}</level>"
)
FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | "
    "cart_id={extra[cart_id]} | {message}"
)


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure loguru handlers. Call once from the application entrypoint."""
    settings = settings or get_settings()

    # Remove the default handler
    logger.remove()
    # Records logged without a bound cart_id still need the key for the format
    logger.configure(extra={"cart_id": "-"})

    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=settings.log_level,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    if settings.log_to_file:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_dir / "cart_calculator.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation=settings.log_rotation,
            retention=settings.log_retention,
            compression="zip",
        )


def get_logger(cart_id: Optional[str] = None):
    """Logger bound to the given cart id, or to the one in context."""
    return logger.bind(cart_id=cart_id or cart_id_var.get() or "-")


class LoggingContext:
    """Sets cart_id for every get_logger() call inside the block."""

    def __init__(self, cart_id: Optional[str] = None):
        self.cart_id = cart_id
        self._token = None

    def __enter__(self):
        self._token = cart_id_var.set(self.cart_id)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        cart_id_var.reset(self._token)
