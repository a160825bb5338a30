"""Learning companion building blocks: TOML configuration, interactive prompts and output formatting."""

__version__ = "0.1.0"