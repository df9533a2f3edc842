"""Point-prompted object extraction backed by a remote image model."""

__version__ = "0.1.0"
