"""Flatten JSON documents into a typed key/value map; also a logger and a linked list."""

__version__ = "0.1.0"

__all__ = [
    "json_parsing",
    "json_to_map",
    "linked_list",
    "logger",
    "map_setting",
    "vector_storage",
]