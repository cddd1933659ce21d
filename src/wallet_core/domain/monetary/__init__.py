"""Monetary domain package.

This package contains the exact Amount value type used across the wallet: validators,
parsing, canonical formatting, overflow-checked arithmetic, keypad editing and the
display adapter contract.
"""
