"""Console tracing helpers."""
from artvault.config import settings


def log(tag: str, message: str):
    """Print a debug trace when SHOP_DEBUG is on."""
    if settings.debug:
        print(f"[{tag}] {message}")


def warn(tag: str, message: str):
    """Print a warning; always shown."""
    print(f"[{tag}] Warning: {message}")
