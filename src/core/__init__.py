"""
Core domain models, integer codecs, and JSON contracts.

This module contains the foundational building blocks that are independent
of external systems (block decoders, store engines, etc.).
"""
