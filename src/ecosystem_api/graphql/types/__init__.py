"""GraphQL types for the Ecosystem API."""
