"""Read and change the extra kernel features of LG Gram laptops."""

__version__ = "0.7.1"

__all__ = ["__version__"]