#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mmarkfmt/utils/__init__.py
"""Utility helpers shared by the mmarkfmt renderer."""
