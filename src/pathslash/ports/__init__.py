"""Port interfaces for pathslash."""

from pathslash.ports.flavour import FlavourPort

__all__ = ["FlavourPort"]
