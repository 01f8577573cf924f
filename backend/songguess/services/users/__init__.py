"""User store used by the guess endpoint."""
