"""Shared utilities for item-sorter."""
