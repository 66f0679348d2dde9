"""Application layer: use-case orchestration between API and boundary."""
