"""Core type definitions."""

from typing import NewType

# Slug of a content page (e.g., "graphs/topics")
# Distinct from filesystem Path to catch type mismatches
PagePath = NewType("PagePath", str)

# Content directory relative to the content root (e.g., "web development")
DirectoryPath = NewType("DirectoryPath", str)
