"""Core infrastructure: exceptions, logging, validation, paths."""
