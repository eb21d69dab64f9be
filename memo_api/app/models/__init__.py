"""Domain records stored by the repositories."""

from .memo import Memo  # noqa: F401
