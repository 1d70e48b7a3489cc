"""
Shared error handling package.

Centralizes error-to-envelope mapping so that every failure
reaching the web layer is answered with the same JSON shape.
"""
