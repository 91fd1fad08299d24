"""Level boards, Mario, enemies, HUD and session records for a terminal platform game."""

__version__ = "0.1.0"
__all__ = ["__version__"]