"""Configuration: settings models and logging setup."""
