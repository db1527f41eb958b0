from .num_utils import format_number, round_half_up
