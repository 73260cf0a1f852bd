"""Core: configuration, domain, routing, formatting and command services."""
