"""Declarative handlers — kida templates looked up by identifier and group."""
