"""Access-rights domain entities."""

from attrs import define, field, validators


@define(frozen=True, slots=True)
class AccessGrant:
    """Stored listening permission for one (track, listener) pair."""

    track_id: int = field(validator=validators.instance_of(int))
    listener: str = field(validator=validators.instance_of(str))
    can_access: bool = field(default=True, validator=validators.instance_of(bool))

    @property
    def key(self) -> tuple[int, str]:
        """Composite key identifying this grant."""
        return (self.track_id, self.listener)
