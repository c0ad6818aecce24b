"""Resolver functions for the GraphQL schema, grouped by domain."""
