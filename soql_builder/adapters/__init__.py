"""Query translator adapters."""
