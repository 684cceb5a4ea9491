"""Helpers for byte strings, growable buffers, varints, C-style formatting,
glob matching, levelled logging, time conversion, file reading and plain HTTP GET."""

__version__ = "0.1.0"

__all__ = ["mgstr", "mbuf", "varint", "strutil", "dbg", "timeutil", "fileutil", "httpget"]