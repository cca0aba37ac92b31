"""File-backed record keepers for bank accounts, student marks and hospital appointments."""

__version__ = "0.1.0"
__all__ = ["__version__"]