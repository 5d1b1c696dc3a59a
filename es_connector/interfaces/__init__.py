"""Operator-facing interfaces."""
