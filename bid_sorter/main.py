
import sys
import argparse
import logging
from .config import DEFAULT_CSV_PATH, LOG_FORMAT, LOG_LEVEL
from .driver import BidSorter

def main(argv=None):
    arg_parser = argparse.ArgumentParser(description="Load eBid records and compare sorting algorithms")
    arg_parser.add_argument("csv_path", nargs="?", default=DEFAULT_CSV_PATH,
                            help=f"CSV file to load (default: {DEFAULT_CSV_PATH})")
    arg_parser.add_argument("--log-level", default=LOG_LEVEL,
                            choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = arg_parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format=LOG_FORMAT
    )

    logger = logging.getLogger("Main")
    logger.info(f"Starting bid sorter with {args.csv_path}")

    sorter = BidSorter(args.csv_path)
    status = 0
    try:
        status = sorter.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except Exception as e:
        logger.error(f"Bid sorter failed: {e}", exc_info=True)
    finally:
        logger.info(f"Session finished. Held {len(sorter.bids)} bids.")
    return status

if __name__ == "__main__":
    sys.exit(main())
