"""Console rendering of tracker contents."""
