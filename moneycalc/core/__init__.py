"""
Core domain models and mathematical primitives.

This module contains the foundational building blocks that are independent
of external systems (storage, formatting, injection containers, etc.).
"""
