"""
Application package.

``core`` holds configuration, logging, the SQLite user store and
error mapping; ``schemas`` the pydantic request/response models;
``services`` the business logic; ``api`` the routers.  ``main``
assembles them into a FastAPI application.
"""
