"""Subgraph - entity resolution for federated GraphQL services."""

__version__ = "0.1.0"
