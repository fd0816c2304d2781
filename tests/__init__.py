"""etl-dialects test suite."""
