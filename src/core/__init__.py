"""
Core domain models, error taxonomy and data contracts.

This module contains the foundational building blocks that are independent
of callers (schedulers, UI, persistence).
"""
