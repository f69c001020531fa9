"""Element tree, flex layout, text layout and editing, and color helpers for a small GUI."""

__version__ = "0.1.0"