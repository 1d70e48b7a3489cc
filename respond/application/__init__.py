"""
Application layer package.

Orchestrates envelope construction and delivery.
Depends only on the domain layer and its ports.
"""
