# utils/__init__.py
"""
Storefront Admin - shared utilities and domain packages

Version: 1.0.0
"""
