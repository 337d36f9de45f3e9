"""
Application package.

``core`` holds configuration, logging, security helpers, the error
taxonomy and the database handle; ``schemas`` the request and response
models; ``services`` the account and content stores; and ``api`` the
HTTP routes that expose them.
"""
