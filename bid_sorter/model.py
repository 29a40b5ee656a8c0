
from dataclasses import dataclass

@dataclass
class Bid:
    """Data model for a single bid row"""
    bid_id: str = ""
    title: str = ""   # Sort key
    fund: str = ""
    amount: float = 0.0

    def to_dict(self):
        return self.__dict__

    def display(self) -> str:
        # %g keeps "500" and "1200.5" short, matching a plain stream print
        return "{bid_id}: {title} | {amount:g} | {fund}".format(**self.to_dict())
