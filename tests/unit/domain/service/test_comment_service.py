"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from board.domain.error import ValidationError
from board.domain.repository import CommentRepository, UserRepository
from board.domain.service import CommentService
from board.domain.value import CommentId, PageRequest
from tests.conftest import make_comment, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Top-level comment is stored with its author attached."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.create(make_user("alice"))

        # Act
        result = await comment_service.create_comment(author=author, text="Hi")

        # Assert
        assert result.parent_id is None
        assert result.text == "Hi"
        assert result.author is not None
        assert result.author.id == author.id

        saved = await comment_repo.find_by_id(result.id)
        assert saved is not None
        assert saved.user_id == author.id

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.create(make_user())
        parent = await comment_service.create_comment(author=author, text="Root")

        reply = await comment_service.create_comment(
            author=author,
            text="Reply",
            parent_id=parent.id,
            image_path="/uploads/a.png",
        )

        assert reply.parent_id == parent.id
        assert reply.image_path == "/uploads/a.png"
        assert reply.text_file_path is None

    @pytest.mark.asyncio
    async def test_create_with_missing_parent_raises_error(self, unit_env):
        """Replying to a comment that doesn't exist is rejected."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.create(make_user())

        # Act & Assert
        with pytest.raises(ValidationError, match="Parent comment not found"):
            await comment_service.create_comment(
                author=author, text="Test", parent_id=CommentId(uuid4())
            )
        assert await comment_repo.find_all() == []


class TestGetCommentThreads:
    """Tests for get_comment_threads method."""

    @pytest.mark.asyncio
    async def test_returns_assembled_page(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.create(make_user())
        older = await comment_repo.create(make_comment(author, minute=1))
        newer = await comment_repo.create(make_comment(author, minute=2))
        reply = await comment_repo.create(
            make_comment(author, minute=3, parent=older)
        )

        # Act
        page = await comment_service.get_comment_threads(PageRequest.normalize())

        # Assert
        assert page.total_count == 2
        assert [node.comment.id for node in page.items] == [newer.id, older.id]
        assert [node.comment.id for node in page.items[1].replies] == [reply.id]

    @pytest.mark.asyncio
    async def test_empty_store(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        page = await comment_service.get_comment_threads(
            PageRequest.normalize(page=3, page_size=5)
        )

        assert page.items == []
        assert page.total_count == 0
        assert page.page == 3
        assert page.page_size == 5


class TestGetCommentById:
    """Tests for get_comment_by_id method."""

    @pytest.mark.asyncio
    async def test_found_and_missing(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.create(make_user())
        created = await comment_service.create_comment(author=author, text="Hi")

        assert (await comment_service.get_comment_by_id(created.id)).id == created.id
        assert await comment_service.get_comment_by_id(CommentId(uuid4())) is None
