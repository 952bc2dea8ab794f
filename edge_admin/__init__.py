"""Edge Admin: DNS record proxy and operator dashboard for the edge provider."""

__version__ = "1.0.0"
