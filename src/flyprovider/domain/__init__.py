"""Domain layer: records, result types and the application lifecycle."""
