"""Command-line interface for nanogit."""
