__all__ = ["Denomination", "convert", "to_raw", "from_raw", "shift", "to_fixed"]

from .unit_conversion_utils import Denomination, convert, from_raw, shift, to_fixed, to_raw
