"""Interactive applications."""
