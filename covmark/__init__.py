"""covmark: resolve coverage record files into renderable annotations."""

__version__ = "0.1.0"
