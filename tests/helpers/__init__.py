from .factories import mk_i128, mk_price
from .vectors import BOUNDARY_VECTORS, I128_VECTORS

__all__ = [
    "BOUNDARY_VECTORS",
    "I128_VECTORS",
    "mk_i128",
    "mk_price",
]
