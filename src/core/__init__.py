"""
Core primitives: decimal codec, price rounding, DateInt, host model interfaces.

This module contains the foundational building blocks that are independent
of the host application's concrete account and security types.
"""
