"""Day-ahead electricity price analysis for the Swedish spot market."""

__version__ = "0.1.0"
