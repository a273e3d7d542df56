# This project was developed with assistance from AI tools.
"""SavantFS website API."""

__version__ = "0.1.0"
