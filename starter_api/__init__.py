"""
Top-level package for the Starter API.

All functionality lives in the ``app`` subpackage; import
``starter_api.app.main`` for ``create_app`` and the default ``app``.
"""

__all__ = []
