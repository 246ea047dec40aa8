"""gem sources: version listing and the local archive cache."""
from .client import RegistryClient
from .rubygems import RubyGemsRegistry
from .cache import GemCache

__all__ = [
    "RegistryClient",
    "RubyGemsRegistry",
    "GemCache",
]
