"""Service template runtime package."""
