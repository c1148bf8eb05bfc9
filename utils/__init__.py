from .random_gen import SeededRandom
from .logger     import setup_logging

__all__ = ["SeededRandom", "setup_logging"]
