"""Configuration: settings models, config file lookup, and logging setup."""
