"""Domain Types: the four operations and the numbers they work on.

Invariants:
    - Operation values are the service names used in URLs, env vars and logs
    - Default ports are fixed: adder 3000, subtractor 3001, multiplier 3002, divider 3003

Design Decisions:
    - str Enum: serializes to JSON and argparse choices without custom encoders
    - Per-operation metadata as properties over lookup tables scattered in callers
"""

from enum import Enum
from typing import Union


# ─── Value Types ─────────────────────────────────────────────────

# bool is excluded at the schema boundary even though it subclasses int
Number = Union[int, float]


# ─── Enums ───────────────────────────────────────────────────────

class Operation(str, Enum):
    """The binary operations, one per deployable service."""
    ADD = "adder"
    SUBTRACT = "subtractor"
    MULTIPLY = "multiplier"
    DIVIDE = "divider"

    @property
    def display_name(self) -> str:
        """Human-readable service name, e.g. 'Divider Service'."""
        return f"{self.value.capitalize()} Service"

    @property
    def default_port(self) -> int:
        return _DEFAULT_PORTS[self]

    @property
    def port_env_var(self) -> str:
        """Environment variable holding the listening port."""
        return f"{self.value.upper()}_SERVICE_PORT"


_DEFAULT_PORTS = {
    Operation.ADD: 3000,
    Operation.SUBTRACT: 3001,
    Operation.MULTIPLY: 3002,
    Operation.DIVIDE: 3003,
}
