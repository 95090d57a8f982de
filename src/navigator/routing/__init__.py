"""Routing — pattern schemas, a grouped route index, and the Router.

Patterns are compiled once at registration; lookup tokenizes the path
and walks exact-length schemas before wildcard schemas.
"""
