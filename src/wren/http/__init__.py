"""Field sources for web input: parsed form bodies and query strings."""
