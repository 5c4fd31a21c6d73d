# (c) Nelen & Schuurmans

from typing import Any
from typing import List

__all__ = ["Json", "Page"]


# one record, as returned by a gateway
Json = dict[str, Any]
# one fetch worth of records; never longer than the requested limit
Page = List[Json]
