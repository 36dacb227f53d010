"""Media Picker - selection tracking for photo and video pickers."""

__version__ = "0.1.0"
