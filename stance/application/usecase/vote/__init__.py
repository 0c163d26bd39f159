"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .check_vote import CheckVoteRequest, CheckVoteResponse, CheckVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "CheckVoteRequest",
    "CheckVoteResponse",
    "CheckVoteUseCase",
]
