# insults/errors.py

from __future__ import annotations


class InsultsLoadError(RuntimeError):
    """The backing insults document could not be read, decoded or validated."""
