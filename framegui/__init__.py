"""A small widget toolkit that renders windows, text, bitmaps and waveforms into in-memory frame buffers."""

__version__ = "0.1.0"