"""Track-related domain entities.

Pure track representations with zero infrastructure dependencies.
"""

import attrs
from attrs import define, field, validators


def as_label_tuple(labels):
    """Freeze a label sequence; a bare string is left as-is so validation rejects it."""
    if isinstance(labels, str):
        return labels
    if labels is None:
        return ()
    return tuple(labels)


@define(frozen=True, slots=True)
class TrackRecord:
    """Immutable snapshot of one registered track.

    Field bounds are enforced by the validation layer before a record is
    ever built; the validators here only guard types.
    """

    track_id: int = field(validator=[validators.instance_of(int), validators.gt(0)])
    name: str = field(validator=validators.instance_of(str))
    performer: str = field(validator=validators.instance_of(str))
    creator: str = field(validator=validators.instance_of(str))
    length: int = field(validator=validators.instance_of(int))
    added_at: int = field(validator=validators.instance_of(int))
    category: str = field(validator=validators.instance_of(str))
    labels: tuple[str, ...] = field(
        converter=as_label_tuple,
        validator=validators.deep_iterable(
            member_validator=validators.instance_of(str),
        ),
    )

    def with_details(
        self,
        name: str,
        length: int,
        category: str,
        labels: list[str] | tuple[str, ...],
    ) -> "TrackRecord":
        """Create a new record with updated descriptive fields.

        Performer, creator and creation height are carried over unchanged.
        """
        return attrs.evolve(
            self,
            name=name,
            length=length,
            category=category,
            labels=labels,
        )

    def with_creator(self, new_creator: str) -> "TrackRecord":
        """Create a new record owned by ``new_creator``."""
        return attrs.evolve(self, creator=new_creator)
