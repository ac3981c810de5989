"""Linked list, hash table, option parsing, console prompts, item records and a numbering file printer."""

__version__ = "0.1.0"