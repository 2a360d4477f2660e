"""Metaball screensaver scene: marching-cubes mesher, animated blobs, settings and frame transforms."""

__version__ = "1.0.0"