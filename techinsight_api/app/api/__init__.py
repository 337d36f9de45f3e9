"""
API package.

``router.py`` aggregates the domain routers found in ``endpoints``;
``deps.py`` holds the FastAPI dependencies that build services around
the application's database handle.
"""
