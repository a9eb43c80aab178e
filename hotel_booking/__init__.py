"""Hotel booking engine: availability, pricing, reservations and payments."""

__version__ = "1.0.0"
