"""PR TIMES press-release aggregator.

Searches the PR TIMES keyword API across every result page, enriches each
release with its like count and returns the releases ranked by popularity.
"""

__version__ = "0.1.0"
