"""
Memo record.

A memo is a short piece of text with an integer identifier assigned
by the repository.  The identifier never changes once set; the
content may be replaced by an update.
"""

from dataclasses import dataclass


@dataclass
class Memo:
    """A single stored note."""

    id: int
    content: str
