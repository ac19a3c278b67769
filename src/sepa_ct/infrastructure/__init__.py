"""Infrastructure adapters: XML rendering, schema validation, file loading."""
