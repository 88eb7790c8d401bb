"""Entity identifiers. All are integers assigned by the store on insert."""

from typing import NewType

UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
VoteId = NewType("VoteId", int)
FollowId = NewType("FollowId", int)
