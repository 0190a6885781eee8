"""Core pieces of the DoCe card game: settings, game data, a queue and a linked list."""

__version__ = "0.1.0"
__all__ = ["config", "models", "dynamic_queue", "linked_list"]