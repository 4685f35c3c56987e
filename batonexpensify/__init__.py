"""Expensify connector: sync users, policies, roles and grants from Expensify."""

__version__ = "0.1.0"

__all__ = ["__version__"]