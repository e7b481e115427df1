from .copy_strategies import installable_copy_strategies

__all__ = [
    "installable_copy_strategies",
]
