"""Version control adapters."""

from .base import GitAdapter
from .gitpython_client import GitPythonClient

__all__ = ['GitAdapter', 'GitPythonClient']
