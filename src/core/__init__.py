"""
Core arithmetic, domain models and data contracts.

This module contains the foundational building blocks that are independent
of each other and of any caller (no I/O, no shared state).
"""
