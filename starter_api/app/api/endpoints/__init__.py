"""
Endpoint modules.

``users`` defines the JSON API routers aggregated in ``api/router.py``;
``frontend`` builds the catch-all router serving the single-page app.
"""
