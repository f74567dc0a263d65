"""Extension configuration."""
