"""
Core domain models, decimal primitives, and contracts.

This module contains the foundational building blocks the quadrature
engine is layered on: precision configuration, decimal arithmetic,
the function abstraction, and report contracts.
"""
