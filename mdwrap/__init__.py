"""Smart markdown delimiter toggling for multi-cursor text buffers."""

__version__ = "0.1.0"
