"""Core domain: question catalog, data contracts, guidance and scoring."""
