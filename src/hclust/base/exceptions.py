"""
Exception types raised by the clustering core and its collaborators.

Each error subclasses the built-in exception a caller would naturally catch
for that situation (``ValueError`` for bad data, ``RuntimeError`` for a
corrupted or misused engine), so existing ``except ValueError`` handlers keep
working.
"""


class ClusteringError(Exception):
    """Base class for all errors raised by hclust."""


class InvalidInput(ClusteringError, ValueError):
    """Input matrix is empty, ragged, non-numeric or contains non-finite values."""


class EmptyCluster(ClusteringError, ValueError):
    """A cluster with no members was referenced."""


class InsufficientClusters(ClusteringError, RuntimeError):
    """An operation that needs at least two clusters was called with fewer."""
