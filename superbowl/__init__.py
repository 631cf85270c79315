"""A brick-breaker arcade game with an upgradeable ball and saved progress."""

__version__ = "0.1.0"
__all__ = ["__version__"]