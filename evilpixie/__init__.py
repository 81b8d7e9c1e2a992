"""Image core for pixel-art editing: colours, images, blits, conversion and drawing."""

__version__ = "0.1.0"