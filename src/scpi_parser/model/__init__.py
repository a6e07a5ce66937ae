"""Model package — paths, handler registry, and the query cache."""
