"""Application services: the pure aggregation modules."""
