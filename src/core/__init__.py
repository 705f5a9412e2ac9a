"""
Core primitives, domain models, and contracts.

This module contains the foundational building blocks that are independent
of text representations: fixed-width word arithmetic, bit-level operations,
the FixedWidthInteger value object, and JSON contract validation.
"""
