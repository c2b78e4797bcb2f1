"""Fixed-tick arcade shooter core rendered with Pillow."""

__version__ = "0.1.0"
