"""HTTP application for the Ecosystem API."""
