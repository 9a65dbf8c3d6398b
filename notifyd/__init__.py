"""Configuration, rules, shortcut, screen, click and window-shape logic for a desktop notification daemon."""

__version__ = "1.4.0"