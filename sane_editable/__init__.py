"""
sane-editable - Predictable editable surfaces.

Normalizes user-entered text, enforces a maximum length and keeps the
caret still while the user types.
"""

__version__ = "0.1.0"
