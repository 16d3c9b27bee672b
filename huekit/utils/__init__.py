from .num_utils import is_close_to_zero, round_half_up

__all__ = ["is_close_to_zero", "round_half_up"]
