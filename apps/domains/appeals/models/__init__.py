from .appeal import Appeal

__all__ = [
    "Appeal",
]
