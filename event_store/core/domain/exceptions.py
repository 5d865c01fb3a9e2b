class InvalidCursorState(Exception):
    """Raised when a cursor is read or mutated while not positioned on an element."""
    pass
