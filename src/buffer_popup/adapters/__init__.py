"""UI adapters hosting the buffer popup."""
