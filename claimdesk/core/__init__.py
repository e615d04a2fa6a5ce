"""Core layer: configuration, result types, errors and wiring."""
