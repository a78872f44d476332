"""Read and decode Super Mario World ROM data: addresses, headers, layers, graphics and Map16 tilesets."""

__version__ = "0.1.0"