"""A first-person maze raycaster game with enemies, levels and menus."""

__version__ = "0.1.0"