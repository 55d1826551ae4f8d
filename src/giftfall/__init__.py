"""GIFTFALL: catch the falling gifts, dodge the obstacles."""

__version__ = "0.1.0"
