from collections import defaultdict
from typing import Dict, Iterable, List, Set
from app.domain.models.comment import Comment, CommentForest, CommentNode, NoParent, ThreadEntry

import logging
logger = logging.getLogger(__name__)

def build_comment_forest(comments: Iterable[Comment], review_id: int) -> CommentForest:
    """
    Build the reply forest of a review from flat comment records.

    - Only comments of `review_id` are used.
    - Roots keep the input order; children of a node are ordered by creation time.
    - A reply whose parent is not among the review's comments becomes a root.
    - Comments on (or hanging below) a parent cycle can never be reached from a
      root: they are left out, logged and returned in `excluded_ids`.
    """
    arena: Dict[int, CommentNode] = {}
    order: List[int] = []
    excluded: List[int] = []

    for c in comments:
        if c.review_id != review_id:
            continue
        if c.comment_id in arena:
            logger.warning("comment_tree duplicate comment_id=%s review_id=%s (kept first)", c.comment_id, review_id)
            excluded.append(c.comment_id)
            continue
        arena[c.comment_id] = CommentNode(comment=c)
        order.append(c.comment_id)

    roots: List[CommentNode] = []
    children_of: Dict[int, List[CommentNode]] = defaultdict(list)
    for cid in order:
        node = arena[cid]
        parent = node.comment.parent
        if isinstance(parent, NoParent):
            roots.append(node)
        elif parent.comment_id not in arena:
            logger.info(
                "comment_tree orphan comment_id=%s parent=%s review_id=%s promoted to root",
                cid, parent.comment_id, review_id,
            )
            roots.append(node)
        else:
            children_of[parent.comment_id].append(node)

    # explicit stack: depth of a thread never grows the Python call stack
    visited: Set[int] = set()
    stack: List[CommentNode] = list(roots)
    while stack:
        node = stack.pop()
        if node.comment_id in visited:
            continue
        visited.add(node.comment_id)
        kids = sorted(children_of.get(node.comment_id, []), key=lambda n: n.comment.created_at)
        node.children.extend(kids)
        stack.extend(kids)

    cyclic = [cid for cid in order if cid not in visited]
    if cyclic:
        logger.warning(
            "comment_tree parent cycle detected review_id=%s excluded comment_ids=%s",
            review_id, cyclic,
        )
        excluded.extend(cyclic)

    return CommentForest(roots=roots, excluded_ids=excluded)

def build_comment_tree(comments: Iterable[Comment], review_id: int) -> List[CommentNode]:
    """Roots of the reply forest of a review (see build_comment_forest)."""
    return build_comment_forest(comments, review_id).roots

def flatten_thread(roots: Iterable[CommentNode]) -> List[ThreadEntry]:
    """
    Pre-order list of (comment, depth, parent_id) for a forest.
    The flat shape serializes in constant nesting whatever the thread depth.
    """
    entries: List[ThreadEntry] = []
    for root in roots:
        path: List[int] = []  # comment ids from the root down to the previous node
        for depth, node in root.walk():
            del path[depth:]
            entries.append(ThreadEntry(
                comment=node.comment,
                depth=depth,
                parent_id=path[-1] if path else None,
            ))
            path.append(node.comment_id)
    return entries

def build_comment_thread(comments: Iterable[Comment], review_id: int) -> List[ThreadEntry]:
    """Flattened reply forest of a review, as rendered on the product page."""
    return flatten_thread(build_comment_tree(comments, review_id))
