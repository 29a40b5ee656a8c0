import sys
import time
import logging
from typing import Callable, List, Optional, TextIO

from .config import DEFAULT_CSV_PATH, MENU, EXIT_CHOICE, TICKS_PER_SECOND
from .model import Bid
from .sorting import selection_sort, quick_sort
from .storage import Storage

logger = logging.getLogger(__name__)

class BidSorter:
    """Menu loop that loads, lists and sorts bids, timing each step."""

    def __init__(self, csv_path: str = DEFAULT_CSV_PATH,
                 stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.csv_path = csv_path
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.bids: List[Bid] = []

    def _print(self, *args, end="\n"):
        print(*args, end=end, file=self.stdout)

    def _show_menu(self):
        self._print("Menu:")
        for choice, label in MENU.items():
            self._print(f"  {choice}. {label}")
        self._print("Enter choice: ", end="")
        self.stdout.flush()

    def _read_choice(self) -> Optional[int]:
        """
        Read one menu choice.

        Returns None for anything that is not an integer. End of input
        counts as the exit choice.
        """
        line = self.stdin.readline()
        if not line:
            logger.info("End of input, exiting")
            return EXIT_CHOICE
        try:
            return int(line.strip())
        except ValueError:
            logger.debug(f"Ignoring menu input {line.strip()!r}")
            return None

    def _timed(self, func: Callable[[], object]) -> int:
        start = time.perf_counter_ns()
        func()
        return time.perf_counter_ns() - start

    def _report_time(self, ticks: int):
        self._print(f"time: {ticks} clock ticks")
        self._print(f"time: {ticks / TICKS_PER_SECOND} seconds")

    def load(self):
        ticks = self._timed(self._load_bids)
        self._print(f"{len(self.bids)} bids read")
        self._report_time(ticks)

    def _load_bids(self):
        self.bids = Storage.load_csv(self.csv_path)

    def display(self):
        for bid in self.bids:
            self._print(bid.display())
        self._print()

    def sort(self, algorithm: Callable[[List[Bid]], None]):
        ticks = self._timed(lambda: algorithm(self.bids))
        logger.info(f"{algorithm.__name__} sorted {len(self.bids)} bids in {ticks} ns")
        self._print(f"{len(self.bids)} bids sorted")
        self._report_time(ticks)

    def run(self) -> int:
        actions = {
            1: self.load,
            2: self.display,
            3: lambda: self.sort(selection_sort),
            4: lambda: self.sort(quick_sort),
        }

        choice = None
        while choice != EXIT_CHOICE:
            self._show_menu()
            choice = self._read_choice()
            action = actions.get(choice)
            if action:
                action()

        self._print("Good bye.")
        return 0
