"""Core infrastructure for hashkit: exceptions, interfaces, config models and settings."""
