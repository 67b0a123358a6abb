"""A tile-based maze game: validate .ber maps, then collect every coin and reach the exit."""

__version__ = "0.1.0"
__all__ = ["__version__"]