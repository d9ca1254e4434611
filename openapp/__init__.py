"""openapp package: launch, locate or reveal applications by name from the command line.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__version__ = "0.4.0"

__all__: list[str] = []
