"""
Ecosystem API
GraphQL access to core unit, budget statement and roadmap records
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
