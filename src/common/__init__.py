"""Common utilities shared across packages."""
