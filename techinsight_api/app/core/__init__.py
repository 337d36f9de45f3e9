"""
Cross-cutting infrastructure: settings, logging, password hashing,
errors and the MongoDB handle.
"""
