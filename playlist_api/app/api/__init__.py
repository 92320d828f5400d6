"""
API package containing the HTTP routes.

``router`` bundles the JSON endpoints that are mounted under ``/api``;
the rendered pages live in ``endpoints.pages`` and are mounted at the
site root by ``main.create_app``.
"""
