"""Request routing for the OAuth relay."""
