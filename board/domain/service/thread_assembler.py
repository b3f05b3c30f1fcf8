"""Thread assembly: flat comment list to sorted, paginated reply trees."""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Callable, Iterable

import logfire

from board.domain.error import IntegrityError
from board.domain.model import Comment, User
from board.domain.value import CommentId, PageRequest, SortField

from .base import Service


@dataclass
class CommentNode:
    """A comment together with its direct replies, oldest first."""

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)


@dataclass
class CommentThreadPage:
    """One page of top-level threads.

    ``total_count`` counts top-level comments only, so clients can page
    through threads without knowing how many replies each carries.
    """

    items: list[CommentNode]
    total_count: int
    page: int
    page_size: int


def resolved_author(comment: Comment) -> User:
    """Return the comment's author or raise if the store didn't resolve it."""
    author = comment.author
    if author is None:
        raise IntegrityError("Comment", str(comment.id), "author is not resolved")
    if author.id != comment.user_id:
        raise IntegrityError(
            "Comment",
            str(comment.id),
            f"author {author.id} does not match user_id {comment.user_id}",
        )
    return author


def _sort_key(sort_by: SortField) -> Callable[[Comment], object]:
    if sort_by is SortField.USER_NAME:
        return lambda c: resolved_author(c).user_name.root.casefold()
    if sort_by is SortField.EMAIL:
        return lambda c: resolved_author(c).email.root.casefold()
    return lambda c: c.created_at


class ThreadAssembler(Service):
    """Builds reply trees from a flat list of comments.

    Input is expected in creation order; replies at every level keep that
    order. Only top-level comments are sorted by the requested field, with
    a stable sort so ties stay in creation order for both directions.
    """

    def assemble(
        self, comments: Iterable[Comment], request: PageRequest
    ) -> CommentThreadPage:
        """Assemble one page of comment threads.

        Args:
            comments: All comments, oldest first, authors resolved
            request: Normalized paging and ordering

        Returns:
            The requested page of top-level threads

        Raises:
            IntegrityError: If a served comment has no resolved author
        """
        comments = list(comments)
        with logfire.span(
            "thread_assembler.assemble",
            comment_count=len(comments),
            page=request.page,
            page_size=request.page_size,
            sort_by=request.sort_by.value,
            ascending=request.ascending,
        ):
            children = self._index_by_parent(comments)
            roots = children.get(None, [])

            roots = sorted(
                roots, key=_sort_key(request.sort_by), reverse=not request.ascending
            )
            window = roots[request.offset : request.offset + request.page_size]
            items = [self._build_thread(root, children) for root in window]

            return CommentThreadPage(
                items=items,
                total_count=len(roots),
                page=request.page,
                page_size=request.page_size,
            )

    def _index_by_parent(
        self, comments: list[Comment]
    ) -> dict[CommentId | None, list[Comment]]:
        """Group comments by parent id in one pass, dropping orphans."""
        known = {c.id for c in comments}
        children: dict[CommentId | None, list[Comment]] = defaultdict(list)
        orphans = 0
        for comment in comments:
            if comment.parent_id is not None and comment.parent_id not in known:
                orphans += 1
                continue
            children[comment.parent_id].append(comment)

        if orphans:
            logfire.warn(
                "Comments reference missing parents and will not be served",
                orphan_count=orphans,
            )

        unreachable = len(comments) - orphans - self._count_reachable(children)
        if unreachable:
            logfire.warn(
                "Comments are not reachable from any top-level comment",
                unreachable_count=unreachable,
            )
        return children

    @staticmethod
    def _count_reachable(children: dict[CommentId | None, list[Comment]]) -> int:
        count = 0
        stack = list(children.get(None, []))
        while stack:
            comment = stack.pop()
            count += 1
            stack.extend(children.get(comment.id, []))
        return count

    @staticmethod
    def _build_thread(
        root: Comment, children: dict[CommentId | None, list[Comment]]
    ) -> CommentNode:
        """Attach replies under ``root`` using an explicit stack.

        Depth is only bounded by memory; there is no recursion.
        """
        resolved_author(root)
        top = CommentNode(comment=root)
        stack = [top]
        while stack:
            node = stack.pop()
            for reply in children.get(node.comment.id, []):
                resolved_author(reply)
                child = CommentNode(comment=reply)
                node.replies.append(child)
                stack.append(child)
        return top
