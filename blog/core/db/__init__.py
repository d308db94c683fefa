from .store import DataStore
from .seed import seed_sample_data

__all__ = [
    "DataStore",
    "seed_sample_data",
]
