"""Per-call execution context supplied by the hosting environment."""

from attrs import define, field, validators


@define(frozen=True, slots=True)
class CallContext:
    """Who is calling and at which ledger height.

    The hosting environment builds one of these for every call; the catalog
    never reads caller identity or height from anywhere else.
    """

    caller: str = field(validator=[validators.instance_of(str), validators.min_len(1)])
    block_height: int = field(
        default=0,
        validator=[validators.instance_of(int), validators.ge(0)],
    )

    def at_height(self, block_height: int) -> "CallContext":
        """Same caller, different ledger height."""
        return CallContext(caller=self.caller, block_height=block_height)
