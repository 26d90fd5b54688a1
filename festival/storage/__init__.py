"""Storage package: file-backed stores."""
from .base import BaseStore
from .preferences import PreferencesStore

__all__ = [
    'BaseStore',
    'PreferencesStore',
]
