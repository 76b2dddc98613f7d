"""hermes — tell code changes apart from comment-only changes."""

__version__ = "0.3.0"
