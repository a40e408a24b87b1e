"""Sidebar navigation resolver for static documentation sites."""
