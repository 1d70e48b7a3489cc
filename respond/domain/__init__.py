"""
Domain layer package.

Contains pure envelope logic: entities, the error kind catalog,
message formatting and port interfaces.
No framework imports, no IO, no side effects.
"""
