"""Infrastructure layer - concrete collaborator implementations.

The engine only sees the protocols in ``reftoken.domain.protocols``; the
in-memory store here backs the demo host and the tests.
"""
