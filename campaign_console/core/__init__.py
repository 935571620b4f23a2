"""Core: configuration, logging, and the shared error taxonomy."""
