"""GraphQL surface of the Ecosystem API."""
