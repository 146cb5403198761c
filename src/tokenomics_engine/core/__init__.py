"""
Core domain models, integer math primitives, and payload contracts.

This module contains the foundational building blocks that are independent
of external systems (wallets, contracts, UI).
"""
