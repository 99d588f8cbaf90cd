"""Config-Scanner: static discovery of configuration keys in TypeScript projects."""

__version__ = "0.1.0"
