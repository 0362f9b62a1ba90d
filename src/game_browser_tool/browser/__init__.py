"""Browser session control."""
