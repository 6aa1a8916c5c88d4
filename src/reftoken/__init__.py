"""Inline reference-token engine for rich text inputs.

Keeps the canonical storage text, the live edit text and the badge display
segments of a single input field in sync on every keystroke.
"""

__version__ = "0.1.0"
