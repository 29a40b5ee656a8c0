
import csv
from typing import List, Mapping, Optional
from .model import Bid
from .parser import BidParser
from .config import COLUMNS, CSV_ENCODING

import logging
logger = logging.getLogger(__name__)

class Storage:
    @staticmethod
    def load_csv(csv_path: str, columns: Optional[Mapping[str, int]] = None) -> List[Bid]:
        """
        Load a CSV file containing bids into a list, in file order.

        The first row is a header and is skipped; every data row must have
        the same number of fields. Blank lines are ignored.

        A missing file, an empty file or a malformed row is logged and the
        bids read before the failure are returned.

        Args:
            csv_path: Path to the CSV file
            columns: Field name -> column index, defaults to config.COLUMNS

        Returns:
            List of Bid objects
        """
        logger.info(f"Loading CSV file {csv_path}")

        parser = BidParser(columns or COLUMNS)
        bids: List[Bid] = []

        try:
            with open(csv_path, 'r', newline='', encoding=CSV_ENCODING) as f:
                reader = csv.reader(f)
                header = next(reader, None)
                if header is None:
                    raise ValueError("No header row found")

                for row in reader:
                    if not row:
                        continue
                    if len(row) != len(header):
                        raise ValueError(
                            f"Expected {len(header)} fields in line {reader.line_num}, saw {len(row)}"
                        )
                    bids.append(parser.parse_row(row))
        except (OSError, ValueError, IndexError, csv.Error) as e:
            # UnicodeDecodeError is a ValueError
            logger.error(f"Error loading CSV: {e}")

        logger.info(f"Read {len(bids)} bids from {csv_path}")
        return bids
