"""What-if calculator for interest avoided by paying credit cards in full."""

__version__ = "1.0.0"
