"""Runnable examples of creational and behavioural design patterns."""

__version__ = "0.1.0"

__all__ = [
    "abstract_factory",
    "builder",
    "chain",
    "command",
    "factory_method",
    "prototype",
    "singleton",
    "state",
    "strategy",
    "template_method",
    "visitor",
]