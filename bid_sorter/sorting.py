# sorting.py
# In-place sorting algorithms that order bids by title

from typing import List, Optional

from .model import Bid


def selection_sort(bids: List[Bid]) -> None:
    """
    Sort bids by title in place using selection sort.

    Each pass swaps the first minimum of the unsorted suffix into place,
    so equal titles keep the order in which the scans find them.
    """
    size = len(bids)
    for pos in range(size - 1):
        min_index = pos
        for j in range(pos + 1, size):
            if bids[j].title < bids[min_index].title:
                min_index = j
        bids[pos], bids[min_index] = bids[min_index], bids[pos]


def partition(bids: List[Bid], begin: int, end: int) -> int:
    """
    Hoare partition of bids[begin..end] around the middle element's title.

    :return:
        The split index: every title in [begin, split] is <= every title
        in [split + 1, end].
    """
    pivot = bids[(begin + end) // 2].title
    low = begin
    high = end

    while True:
        while bids[low].title < pivot:
            low += 1
        while pivot < bids[high].title:
            high -= 1

        if low >= high:
            return high

        bids[low], bids[high] = bids[high], bids[low]
        low += 1
        high -= 1


def quick_sort(bids: List[Bid], begin: int = 0, end: Optional[int] = None) -> None:
    """
    Sort bids[begin..end] by title in place using quick sort.

    Only the smaller side of each split is sorted recursively; the larger
    side is handled by the loop, so stack depth stays within O(log N) even
    when every split is lopsided.
    """
    if end is None:
        # Empty list gives end = -1, which the range check below skips
        end = len(bids) - 1
    while begin < end:
        mid = partition(bids, begin, end)
        if mid - begin < end - mid:
            quick_sort(bids, begin, mid)
            begin = mid + 1
        else:
            quick_sort(bids, mid + 1, end)
            end = mid
