"""Named binary resources such as images and fonts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Resource(Protocol):
    """A binary resource with an identifying name and byte content."""

    name: str
    content: bytes


@dataclass
class StaticResource:
    """A resource held in memory, usually bundled with the application."""

    name: str
    content: bytes

    def to_code(self) -> str:
        """Return source code that recreates this resource."""
        data = ", ".join(str(byte) for byte in self.content)
        return (
            "StaticResource(\n"
            f'\tname="{self.name}",\n'
            "\tcontent=bytes([\n"
            f"\t\t{data}]))"
        )