"""Poll loop states."""
from enum import Enum


class PollState(Enum):
    """States a single poll moves through.

    ``ATTEMPTING`` and ``COOLING_DOWN`` alternate until one of the three
    terminal states is reached.
    """

    ATTEMPTING = "attempting"
    COOLING_DOWN = "cooling_down"
    SUCCEEDED = "succeeded"
    TIMED_OUT_ERROR = "timed_out_error"
    TIMED_OUT_UNAVAILABLE = "timed_out_unavailable"

    @property
    def is_terminal(self) -> bool:
        return self in (
            PollState.SUCCEEDED,
            PollState.TIMED_OUT_ERROR,
            PollState.TIMED_OUT_UNAVAILABLE,
        )
