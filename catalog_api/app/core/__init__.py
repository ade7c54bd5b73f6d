"""Configuration, logging and database context."""
