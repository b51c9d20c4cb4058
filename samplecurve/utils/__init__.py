from .default import fill_missing, value_or_default
from .num_utils import is_real_number, round_half_up

__all__ = [
    "fill_missing",
    "value_or_default",
    "is_real_number",
    "round_half_up",
]
