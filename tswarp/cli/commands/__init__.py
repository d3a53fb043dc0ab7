"""CLI command modules. Each exposes ``register_*_commands(cli)``."""
