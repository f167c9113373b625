"""Container types: dynamic array, doubly linked list, ring-buffer queue and stack."""

__version__ = "0.1.0"
__all__ = ["dynarray", "linkedlist", "ringqueue", "stack"]