"""Contract for resource resolvers consumed by the metadata builder."""

from __future__ import annotations

from typing import Protocol

from ..models import TypeRef


class ResourceResolver(Protocol):
    """Maps a symbolic resource id to a resource handle for an owner type."""

    def resolve(self, owner: TypeRef, kind: str, symbolic_id: str) -> int:
        """Return the handle or raise ``ResolutionError``."""
