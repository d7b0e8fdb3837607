"""Core package: configuration, logging, database and the Result type."""
