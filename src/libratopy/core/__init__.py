"""Core domain: models, ports, statistics, metrics and wire encoders."""
