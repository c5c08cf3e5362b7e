"""GitDepend: keeps interdependent git checkouts built and their package references current."""

from .version import __version__

__all__ = ['__version__']
