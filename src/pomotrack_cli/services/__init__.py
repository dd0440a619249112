"""Services used around the core session."""
