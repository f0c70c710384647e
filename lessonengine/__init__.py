"""A small pygame engine with paged menus, sprites and parallax backgrounds."""

__version__ = "0.1.0"