"""Binary trees of integers with parent links, measurements, traversals and text rendering."""

__version__ = "0.1.0"
__all__ = ["node", "measure", "traversal", "display"]