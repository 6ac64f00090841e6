"""Resource resolvers used to map style ids to handles."""

from .base import ResourceResolver
from .table import SymbolTableError, SymbolTableResolver, split_symbolic_id

__all__ = [
    "ResourceResolver",
    "SymbolTableError",
    "SymbolTableResolver",
    "split_symbolic_id",
]
