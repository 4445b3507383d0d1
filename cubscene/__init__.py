"""Read and validate .cub scene description files, with the small string,
line-reading and buffer helpers the reader is built on."""

__version__ = "0.1.0"