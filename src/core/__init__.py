"""
Core domain models and vector algebra primitives.

This module contains the foundational building blocks: the immutable
Vector value type and the pure functions operating on it.
"""
