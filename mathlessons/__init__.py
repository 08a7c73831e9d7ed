"""Console maths lessons, input checks and a small calculator with history."""

__version__ = "1.0.0"