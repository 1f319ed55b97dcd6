"""Kernel building blocks: bitmaps, ring buffers, linked lists, C string and formatting helpers, calendar time, keyboard decoding and a PIC model."""

__version__ = "0.1.0"