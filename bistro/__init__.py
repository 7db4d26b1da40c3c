"""Restaurant menu, special offers and ordering for admins and clients."""

__version__ = "0.1.0"
__all__ = ["__version__"]