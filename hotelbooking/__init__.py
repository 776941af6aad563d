"""Hotel booking services: loyalty and reservation APIs, payment storage and shared building blocks."""

__version__ = "0.1.0"