"""Command-line interface for tfvarsub."""
