"""Scene file parsing, map validation, XPM images and textures for a grid raycaster."""

__version__ = "0.1.0"