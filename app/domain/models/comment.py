from __future__ import annotations
from datetime import datetime
from typing import Annotated, Any, Iterator, List, Literal, Optional, Tuple, Union
from pydantic import BaseModel, Field, model_validator


class NoParent(BaseModel):
    """Top-level comment: replies directly to the review."""
    kind: Literal["none"] = "none"
    model_config = {"frozen": True}


class ParentId(BaseModel):
    """Reply to another comment of the same review."""
    kind: Literal["comment"] = "comment"
    comment_id: int
    model_config = {"frozen": True}


ParentRef = Annotated[Union[NoParent, ParentId], Field(discriminator="kind")]


class Comment(BaseModel):
    comment_id: int
    user_id: int
    review_id: int
    parent: ParentRef = Field(default_factory=NoParent)
    text: str
    created_at: datetime

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _parent_from_record(cls, data: Any) -> Any:
        """
        Records coming from the store carry a nullable `parent_comment_id`.
        Convert it into the explicit parent reference.
        """
        if isinstance(data, dict) and "parent_comment_id" in data:
            data = dict(data)
            raw = data.pop("parent_comment_id")
            if "parent" not in data:
                data["parent"] = {"kind": "none"} if raw is None else {"kind": "comment", "comment_id": raw}
        return data


class CommentNode(BaseModel):
    comment: Comment
    children: List[CommentNode] = Field(default_factory=list)

    @property
    def comment_id(self) -> int:
        return self.comment.comment_id

    def walk(self) -> Iterator[Tuple[int, CommentNode]]:
        """Pre-order traversal yielding (depth, node), without recursion."""
        stack: List[Tuple[int, CommentNode]] = [(0, self)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            # reversed so the first child is popped first
            stack.extend((depth + 1, child) for child in reversed(node.children))


class ThreadEntry(BaseModel):
    """One comment of a flattened thread, in pre-order; `parent_id` is None for roots."""
    comment: Comment
    depth: int = Field(ge=0)
    parent_id: Optional[int] = None

    model_config = {"frozen": True}


class CommentForest(BaseModel):
    roots: List[CommentNode] = Field(default_factory=list)
    excluded_ids: List[int] = Field(default_factory=list)  # cyclic or duplicate records
