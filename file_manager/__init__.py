"""file_manager package: interactive terminal file manager built on clean architecture.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []

__version__ = "1.0.0"
