"""Comment output representations.

Reply trees can be nested far deeper than pydantic-core will serialize or
validate in one recursive pass. Anything that crosses a process boundary
therefore goes through the flat forms here: ``CommentPageResponse.to_json``
writes the nested wire JSON one comment at a time, and the cache stores a
``FlatCommentPage`` of records in pre-order that ``to_nested`` rebuilds.
"""

import math
from datetime import datetime

from board.application.usecase.base import CamelModel
from board.domain.model import Comment
from board.domain.service import CommentNode, CommentThreadPage, resolved_author
from board.domain.value import PageRequest


class CommentRecord(CamelModel):
    """A single comment without its replies."""

    id: str
    user_name: str
    email: str
    home_page: str | None = None
    text: str
    image_url: str | None = None
    text_file_url: str | None = None
    created_at: datetime
    parent_comment_id: str | None = None


class CommentDto(CommentRecord):
    """Comment as served to clients, replies nested recursively."""

    replies: list["CommentDto"] = []

    @classmethod
    def from_comment(
        cls, comment: Comment, replies: list["CommentDto"] | None = None
    ) -> "CommentDto":
        """Convert one comment; its replies must already be converted.

        Raises:
            IntegrityError: If the comment's author isn't resolved
        """
        author = resolved_author(comment)
        return cls(
            id=str(comment.id),
            user_name=author.user_name.root,
            email=author.email.root,
            home_page=author.home_page.root if author.home_page else None,
            text=comment.text,
            image_url=comment.image_path,
            text_file_url=comment.text_file_path,
            created_at=comment.created_at,
            parent_comment_id=str(comment.parent_id) if comment.parent_id else None,
            replies=replies or [],
        )

    @classmethod
    def from_domain(cls, root: CommentNode) -> "CommentDto":
        """Convert a whole thread with an explicit post-order walk.

        Children are converted before their parent, so each DTO is built
        once with its final replies and no recursion is needed.
        """
        converted: dict[int, CommentDto] = {}
        stack: list[tuple[CommentNode, bool]] = [(root, False)]
        while stack:
            node, children_done = stack.pop()
            if not children_done:
                stack.append((node, True))
                stack.extend((child, False) for child in node.replies)
                continue
            replies = [converted.pop(id(child)) for child in node.replies]
            converted[id(node)] = cls.from_comment(node.comment, replies)
        return converted[id(root)]

    def to_record(self) -> CommentRecord:
        return CommentRecord(**self.model_dump(exclude={"replies"}))


def _push_in_order(stack: list, dtos: list[CommentDto]) -> None:
    # Reversed so they pop in order, with separators between siblings
    for index in range(len(dtos) - 1, -1, -1):
        stack.append(dtos[index])
        if index:
            stack.append(",")


class CommentPageResponse(CamelModel):
    """One page of comment threads with paging metadata."""

    items: list[CommentDto]
    total_count: int
    page: int
    page_size: int
    total_pages: int

    @classmethod
    def from_domain(cls, threads: CommentThreadPage) -> "CommentPageResponse":
        return cls(
            items=[CommentDto.from_domain(node) for node in threads.items],
            total_count=threads.total_count,
            page=threads.page,
            page_size=threads.page_size,
            total_pages=math.ceil(threads.total_count / threads.page_size),
        )

    @classmethod
    def empty(cls, request: PageRequest) -> "CommentPageResponse":
        """Page with no items that echoes the requested paging."""
        return cls(
            items=[],
            total_count=0,
            page=request.page,
            page_size=request.page_size,
            total_pages=0,
        )

    def to_json(self) -> str:
        """camelCase wire JSON, encoded without recursion.

        Each comment is dumped on its own and its ``replies`` array is
        spliced in from an explicit stack, so thread depth is bounded by
        memory only. The output matches ``model_dump_json(by_alias=True)``.
        """
        paging = self.model_dump_json(by_alias=True, exclude={"items"})
        parts = ['{"items":[']
        stack: list = ["]," + paging[1:]]
        _push_in_order(stack, self.items)
        while stack:
            entry = stack.pop()
            if isinstance(entry, str):
                parts.append(entry)
                continue
            record = entry.model_dump_json(by_alias=True, exclude={"replies"})
            parts.append(record[:-1] + ',"replies":[')
            stack.append("]}")
            _push_in_order(stack, entry.replies)
        return "".join(parts)

    def to_flat(self) -> "FlatCommentPage":
        """Flatten every thread into pre-order records."""
        records: list[CommentRecord] = []
        stack = list(reversed(self.items))
        while stack:
            dto = stack.pop()
            records.append(dto.to_record())
            stack.extend(reversed(dto.replies))
        return FlatCommentPage(
            comments=records,
            total_count=self.total_count,
            page=self.page,
            page_size=self.page_size,
            total_pages=self.total_pages,
        )


class FlatCommentPage(CamelModel):
    """Cache form of a page: comments in pre-order, linked by parent id."""

    comments: list[CommentRecord]
    total_count: int
    page: int
    page_size: int
    total_pages: int

    def to_nested(self) -> CommentPageResponse:
        """Rebuild the reply trees.

        Records without a parent are threads in page order; every other
        record follows its parent.

        Raises:
            ValueError: If a record's parent hasn't been seen before it
        """
        built: dict[str, CommentDto] = {}
        items: list[CommentDto] = []
        for record in self.comments:
            dto = CommentDto(**record.model_dump(), replies=[])
            if record.parent_comment_id is None:
                items.append(dto)
            else:
                parent = built.get(record.parent_comment_id)
                if parent is None:
                    raise ValueError(
                        f"Comment {record.id} precedes its parent "
                        f"{record.parent_comment_id}"
                    )
                parent.replies.append(dto)
            built[record.id] = dto
        return CommentPageResponse(
            items=items,
            total_count=self.total_count,
            page=self.page,
            page_size=self.page_size,
            total_pages=self.total_pages,
        )
