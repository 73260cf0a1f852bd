"""Command services: the routines behind each handler key."""
