"""
Shared pytest fixtures for the bid sorter test suite.
"""
import csv
import pytest

from bid_sorter.model import Bid

HEADER = ["Auction Title", "Auction ID", "Department", "Close Date", "Winning Bid",
          "Inventory ID", "Vehicle ID", "Receipt Number", "Fund"]


def ebid_row(title, bid_id, amount, fund):
    """Nine-column eBid row with the consumed fields at 0, 1, 4 and 8."""
    return [title, bid_id, "", "", amount, "", "", "", fund]


def middle_minimum_titles(n):
    """
    Titles for n records where the middle of every remaining range holds the
    smallest title, so each middle-pivot partition splits off one record.

    Replays the partition moves on positions: the record at the middle is
    given the next rank and swapped to the front of the range.
    """
    labels = list(range(n))
    rank_of = [0] * n
    end = n - 1
    for begin in range(n - 1):
        mid = (begin + end) // 2
        rank_of[labels[mid]] = begin
        labels[begin], labels[mid] = labels[mid], labels[begin]
    if n:
        rank_of[labels[n - 1]] = n - 1
    return [f"title {rank:05d}" for rank in rank_of]


@pytest.fixture
def write_csv(tmp_path):
    """Write rows (header first) to a CSV file under tmp_path, return its path."""
    def _write(rows, name="bids.csv", header=HEADER):
        path = tmp_path / name
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            if header is not None:
                writer.writerow(header)
            writer.writerows(rows)
        return str(path)
    return _write


@pytest.fixture
def sample_csv(write_csv):
    return write_csv([
        ebid_row("Bridge", "001", "$500.00", "FundA"),
        ebid_row("Arch", "002", "$100.00", "FundB"),
    ])


@pytest.fixture
def sample_bids():
    return [
        Bid(bid_id="98109", title="Table", fund="General Fund", amount=10.0),
        Bid(bid_id="98107", title="Chair", fund="Enterprise", amount=25.5),
        Bid(bid_id="98110", title="Laptop", fund="General Fund", amount=1200.5),
        Bid(bid_id="98111", title="Chair", fund="General Fund", amount=7.0),
        Bid(bid_id="98105", title="Bicycle", fund="Enterprise", amount=60.0),
        Bid(bid_id="98120", title="Zamboni", fund="Enterprise", amount=15000.0),
        Bid(bid_id="98101", title="Anvil", fund="General Fund", amount=3.25),
    ]
