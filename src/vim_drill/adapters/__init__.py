"""Host adapters for the drill engine."""
