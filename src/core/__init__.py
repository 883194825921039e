"""
Core calendar models, conversion and arithmetic.

This package contains the stateless building blocks that are independent
of external collaborators (formatting, HTTP, timezone resolution).
"""
