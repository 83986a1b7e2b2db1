"""Reshape ("view") layer for batches of float tensors."""

__version__ = "0.1.0"
__all__ = ["view"]