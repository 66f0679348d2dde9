"""Core domain definitions: job schema, column layout and exceptions."""
