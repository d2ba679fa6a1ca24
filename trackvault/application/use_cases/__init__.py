"""Application use cases - orchestrate catalog mutations."""

from .delete_track import DeleteTrackCommand, DeleteTrackUseCase
from .modify_track import ModifyTrackCommand, ModifyTrackUseCase
from .register_track import TRACK_COUNTER, RegisterTrackCommand, RegisterTrackUseCase
from .transfer_ownership import TransferOwnershipCommand, TransferOwnershipUseCase

__all__ = [
    "TRACK_COUNTER",
    "DeleteTrackCommand",
    "DeleteTrackUseCase",
    "ModifyTrackCommand",
    "ModifyTrackUseCase",
    "RegisterTrackCommand",
    "RegisterTrackUseCase",
    "TransferOwnershipCommand",
    "TransferOwnershipUseCase",
]
