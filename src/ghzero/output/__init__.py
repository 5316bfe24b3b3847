"""Output layer — rich text renderers and JSON formatting for ComponentResult."""
