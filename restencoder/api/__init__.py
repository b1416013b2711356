"""Response writing: options, error responses and sinks."""
