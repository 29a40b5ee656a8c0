
# Input Configuration
DEFAULT_CSV_PATH = "eBid_Monthly_Sales.csv"

# Column positions in the eBid monthly sales export (0-based)
COLUMNS = {
    "title": 0,    # Auction Title
    "bid_id": 1,   # Auction ID
    "amount": 4,   # Winning Bid, e.g. "$1,200.50"
    "fund": 8,     # Fund
}

CURRENCY_SYMBOL = "$"
THOUSANDS_SEPARATOR = ","

# utf-8-sig also accepts files saved with a byte order mark
CSV_ENCODING = "utf-8-sig"

# Menu Configuration
MENU = {
    1: "Load Bids",
    2: "Display All Bids",
    3: "Selection Sort All Bids",
    4: "Quick Sort All Bids",
    9: "Exit",
}
EXIT_CHOICE = 9

# Timing
TICKS_PER_SECOND = 1_000_000_000  # time.perf_counter_ns resolution

# Logging
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVEL = "WARNING"  # Keep interactive output readable; use --log-level INFO for progress
