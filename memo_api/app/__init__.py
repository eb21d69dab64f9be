"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The memo domain is split into a model, a repository
holding the records in memory, a service layer and a versioned router
defined in ``api/v1/endpoints``.
"""

from .main import app, create_app  # noqa: F401
