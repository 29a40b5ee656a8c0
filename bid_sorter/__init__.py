"""
Bid Sorter

Loads eBid monthly sales records from CSV and compares selection sort
against quick sort on the bid titles.
"""

__version__ = "1.0.0"
