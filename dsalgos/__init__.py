"""Singly and doubly linked lists, bubble sort, and demonstrations of them."""

__version__ = "0.1.0"
__all__ = ["linkedlist", "sorting", "demo"]