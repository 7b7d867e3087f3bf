"""Sales aggregates over CSV sales records, with the lists, queues, hash tables and graph they use."""

__version__ = "0.1.0"