"""zoomtier — zoom-scale content level resolution service."""

__version__ = "0.1.0"
