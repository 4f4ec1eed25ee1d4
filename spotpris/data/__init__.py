"""Data acquisition module.

This module handles:
- The elprisetjustnu.se day-ahead price API
- Price source abstraction (HTTP and in-memory)
- Assembling the anchor day and following day into one series
"""
