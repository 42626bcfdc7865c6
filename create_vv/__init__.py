"""create-vv -- scaffold a new Vue project from a bundled template."""

__version__ = "0.1.0"
