from commands.query import run as cli

__all__ = ["cli"]
