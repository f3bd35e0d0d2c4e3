"""goscaffold -- generates Go project skeletons following the standard layout."""

__version__ = "1.0.0"
