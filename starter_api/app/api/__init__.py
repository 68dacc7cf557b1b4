"""
API package.

``router`` bundles every JSON endpoint and is mounted under ``/api``
by ``create_app``.
"""
