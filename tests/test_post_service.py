"""Tests for the post service against a real (SQLite) store."""

import pytest
from sqlalchemy import func, select, update

from blog_api.core.exceptions import (
    BadRequestException,
    ConcurrentUpdateException,
    DuplicateValueException,
    ForbiddenException,
    NotFoundException,
)
from blog_api.models import Comment, Post, ROLE_USER
from blog_api.services import CommentService, PostService
from blog_api.services.reactions import ReactionAction, apply_reaction


async def fetch_post(session_factory, slug):
    """Read a post through a fresh session so nothing comes from an identity map."""
    async with session_factory() as session:
        result = await session.execute(select(Post).where(Post.slug == slug))
        return result.scalar_one_or_none()


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_by_admin(self, post, admin):
        assert post.slug == "hello-world-2024"
        assert post.title == "Hello, World! 2024"
        assert post.author.id == admin.id
        assert post.author.name == "Ada Admin"
        assert post.published is True
        assert post.likes == [] and post.dislikes == []
        assert post.tags == ["intro", "news"]
        assert post.reading_time == 1

    @pytest.mark.asyncio
    async def test_defaults_to_draft(self, post_service, admin):
        draft = await post_service.create(admin.id, "Draft", "<p>body</p>")
        assert draft.published is False
        assert draft.cover_image == ""
        assert draft.excerpt is None

    @pytest.mark.asyncio
    async def test_non_admin_is_forbidden(self, post_service, reader, session_factory):
        with pytest.raises(ForbiddenException):
            await post_service.create(reader.id, "Nope", "<p>body</p>")
        assert await fetch_post(session_factory, "nope") is None

    @pytest.mark.asyncio
    async def test_unknown_actor_is_forbidden(self, post_service):
        with pytest.raises(ForbiddenException):
            await post_service.create(999, "Nope", "<p>body</p>")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title, content", [("", "<p>x</p>"), ("Title", ""), (None, "<p>x</p>"), ("Title", None)])
    async def test_missing_title_or_content(self, post_service, admin, title, content):
        with pytest.raises(BadRequestException):
            await post_service.create(admin.id, title, content)

    @pytest.mark.asyncio
    async def test_title_without_letters_or_digits(self, post_service, admin):
        with pytest.raises(BadRequestException):
            await post_service.create(admin.id, "!!!", "<p>x</p>")

    @pytest.mark.asyncio
    async def test_title_too_long(self, post_service, admin):
        with pytest.raises(BadRequestException):
            await post_service.create(admin.id, "t" * 201, "<p>x</p>")

    @pytest.mark.asyncio
    async def test_slug_collision_differing_only_in_punctuation(self, post_service, admin):
        await post_service.create(admin.id, "My Post!", "<p>one</p>")
        with pytest.raises(DuplicateValueException) as exc_info:
            await post_service.create(admin.id, "My Post", "<p>two</p>")
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_slug_taken_from_title_as_submitted(self, post_service, admin):
        hearts = await post_service.create(admin.id, "C<3 Rust", "<p>one</p>")
        assert hearts.slug == "c-3-rust"
        assert hearts.title == "C3 Rust"

        plain = await post_service.create(admin.id, "C3 Rust", "<p>two</p>")
        assert plain.slug == "c3-rust"

    @pytest.mark.asyncio
    async def test_renamed_slug_taken_from_sanitized_title(self, post_service, admin):
        created = await post_service.create(admin.id, "Before", "<p>x</p>")
        updated = await post_service.update(admin.id, created.slug, {"title": "C<3 Go"})
        assert updated.slug == "c3-go"

    @pytest.mark.asyncio
    async def test_content_and_text_fields_sanitized(self, post_service, admin):
        created = await post_service.create(
            admin.id,
            "Safe <Title>",
            '<p>ok</p><script>alert(1)</script><img src="x.png" onerror="alert(2)">'
            '<a href="http://example.com">link</a>',
            excerpt="<em>short</em>",
            tags=["<tag>", " spaced "],
        )
        assert "<script" not in created.content
        assert "onerror" not in created.content
        assert 'href="http://example.com"' in created.content
        assert created.title == "Safe Title"
        assert created.excerpt == "emshort/em"
        assert created.tags == ["tag", "spaced"]


class TestGet:
    @pytest.mark.asyncio
    async def test_get_by_slug(self, post_service, post):
        fetched = await post_service.get(post.slug)
        assert fetched.id == post.id
        assert fetched.author is not None

    @pytest.mark.asyncio
    async def test_unpublished_is_readable_by_slug(self, post_service, admin):
        draft = await post_service.create(admin.id, "Secret Draft", "<p>x</p>")
        assert (await post_service.get(draft.slug)).published is False

    @pytest.mark.asyncio
    async def test_missing_slug(self, post_service):
        with pytest.raises(NotFoundException):
            await post_service.get("does-not-exist")


class TestUpdate:
    @pytest.mark.asyncio
    async def test_partial_update(self, post_service, admin, post):
        updated = await post_service.update(admin.id, post.slug, {"content": "<p>new body</p>"})
        assert updated.content == "<p>new body</p>"
        assert updated.title == post.title
        assert updated.excerpt == post.excerpt
        assert updated.tags == post.tags
        assert updated.published is True

    @pytest.mark.asyncio
    async def test_title_change_renames_slug(self, post_service, admin, post, session_factory):
        updated = await post_service.update(admin.id, post.slug, {"title": "A Brand New Title"})
        assert updated.slug == "a-brand-new-title"
        assert await fetch_post(session_factory, post.slug) is None
        assert (await fetch_post(session_factory, "a-brand-new-title")).id == post.id

    @pytest.mark.asyncio
    async def test_title_change_to_own_slug_is_allowed(self, post_service, admin, post):
        updated = await post_service.update(admin.id, post.slug, {"title": "Hello World 2024"})
        assert updated.slug == post.slug
        assert updated.title == "Hello World 2024"

    @pytest.mark.asyncio
    async def test_rename_collision_leaves_post_unchanged(self, post_service, admin, post, session_factory):
        other = await post_service.create(admin.id, "Other Post", "<p>other</p>")
        with pytest.raises(DuplicateValueException):
            await post_service.update(admin.id, post.slug, {"title": "Other Post!", "content": "<p>changed</p>"})

        stored = await fetch_post(session_factory, post.slug)
        assert stored.title == post.title
        assert stored.content == post.content
        assert (await fetch_post(session_factory, other.slug)).id == other.id

    @pytest.mark.asyncio
    async def test_clear_excerpt_and_cover(self, post_service, admin, post):
        updated = await post_service.update(admin.id, post.slug, {"excerpt": None, "cover_image": None})
        assert updated.excerpt is None
        assert updated.cover_image == ""

    @pytest.mark.asyncio
    async def test_other_admin_may_edit(self, post_service, second_admin, post):
        updated = await post_service.update(second_admin.id, post.slug, {"published": False})
        assert updated.published is False

    @pytest.mark.asyncio
    async def test_demoted_author_may_still_edit_own_post(self, post_service, admin, post, db):
        admin.role = ROLE_USER
        await db.commit()
        updated = await post_service.update(admin.id, post.slug, {"tags": ["kept"]})
        assert updated.tags == ["kept"]

    @pytest.mark.asyncio
    async def test_non_author_forbidden_and_unchanged(self, post_service, reader, post, session_factory):
        with pytest.raises(ForbiddenException):
            await post_service.update(reader.id, post.slug, {"title": "Hijacked", "content": "<p>pwned</p>"})

        stored = await fetch_post(session_factory, post.slug)
        assert stored.title == post.title
        assert stored.content == post.content

    @pytest.mark.asyncio
    async def test_unknown_actor(self, post_service, post):
        with pytest.raises(ForbiddenException):
            await post_service.update(999, post.slug, {"content": "<p>x</p>"})

    @pytest.mark.asyncio
    async def test_missing_post(self, post_service, admin):
        with pytest.raises(NotFoundException):
            await post_service.update(admin.id, "missing", {"content": "<p>x</p>"})


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_cascades_comments(self, db, post_service, admin, reader, post, session_factory):
        comments = CommentService(db)
        await comments.add(reader.id, post.slug, "Nice post")
        await comments.add(admin.id, post.slug, "Thanks")

        await post_service.delete(admin.id, post.slug)

        assert await fetch_post(session_factory, post.slug) is None
        async with session_factory() as session:
            remaining = await session.execute(select(func.count(Comment.id)).where(Comment.post_id == post.id))
            assert remaining.scalar_one() == 0

    @pytest.mark.asyncio
    async def test_non_author_forbidden(self, post_service, reader, post, session_factory):
        with pytest.raises(ForbiddenException):
            await post_service.delete(reader.id, post.slug)
        assert await fetch_post(session_factory, post.slug) is not None

    @pytest.mark.asyncio
    async def test_missing_post(self, post_service, admin):
        with pytest.raises(NotFoundException):
            await post_service.delete(admin.id, "missing")


class TestReact:
    @pytest.mark.asyncio
    async def test_like_then_like_again(self, post_service, reader, post):
        liked = await post_service.react(reader.id, post.slug, "like")
        assert liked.likes == [reader.id]
        neutral = await post_service.react(reader.id, post.slug, "like")
        assert neutral.likes == [] and neutral.dislikes == []

    @pytest.mark.asyncio
    async def test_like_then_dislike(self, post_service, reader, post, session_factory):
        await post_service.react(reader.id, post.slug, "like")
        result = await post_service.react(reader.id, post.slug, "dislike")
        assert result.likes == []
        assert result.dislikes == [reader.id]

        stored = await fetch_post(session_factory, post.slug)
        assert stored.likes == []
        assert stored.dislikes == [reader.id]

    @pytest.mark.asyncio
    async def test_sets_disjoint_across_users(self, post_service, admin, reader, post):
        sequence = [
            (admin.id, "like"), (reader.id, "dislike"), (admin.id, "dislike"),
            (reader.id, "like"), (reader.id, "like"), (admin.id, "like"),
        ]
        for user_id, action in sequence:
            result = await post_service.react(user_id, post.slug, action)
            assert not set(result.likes) & set(result.dislikes)
        assert result.likes == [admin.id]
        assert result.dislikes == []

    @pytest.mark.asyncio
    async def test_invalid_action_makes_no_change(self, post_service, reader, post, session_factory):
        with pytest.raises(BadRequestException):
            await post_service.react(reader.id, post.slug, "love")
        stored = await fetch_post(session_factory, post.slug)
        assert stored.likes == [] and stored.dislikes == []

    @pytest.mark.asyncio
    async def test_missing_post(self, post_service, reader):
        with pytest.raises(NotFoundException):
            await post_service.react(reader.id, "missing", "like")

    @pytest.mark.asyncio
    async def test_unknown_user(self, post_service, post):
        with pytest.raises(NotFoundException):
            await post_service.react(999, post.slug, "like")

    @pytest.mark.asyncio
    async def test_concurrent_write_is_rejected_not_lost(self, session_factory, admin, reader, post):
        async with session_factory() as first, session_factory() as second:
            first_service, second_service = PostService(first), PostService(second)
            # Both requests read the same version before either writes.
            first_post = await first_service._get_by_slug(post.slug)
            second_post = await second_service._get_by_slug(post.slug)

            first_post.likes, first_post.dislikes = apply_reaction(
                admin.id, ReactionAction.LIKE, first_post.likes, first_post.dislikes
            )
            await first_service._commit()

            second_post.likes, second_post.dislikes = apply_reaction(
                reader.id, ReactionAction.LIKE, second_post.likes, second_post.dislikes
            )
            with pytest.raises(ConcurrentUpdateException) as exc_info:
                await second_service._commit()
            assert exc_info.value.status_code == 409

        stored = await fetch_post(session_factory, post.slug)
        assert stored.likes == [admin.id]

        async with session_factory() as session:
            retried = await PostService(session).react(reader.id, post.slug, "like")
        assert retried.likes == [admin.id, reader.id]


class TestList:
    @pytest.mark.asyncio
    async def test_pagination_of_published_posts(self, post_service, admin):
        for i in range(15):
            await post_service.create(admin.id, f"Published {i}", "<p>x</p>", published=True)
        for i in range(5):
            await post_service.create(admin.id, f"Draft {i}", "<p>x</p>")

        posts, pagination = await post_service.list_posts(page=1, limit=10, published_only=True)
        assert len(posts) == 10
        assert pagination.total == 15
        assert pagination.pages == 2
        assert all(p.published for p in posts)

        second_page, _ = await post_service.list_posts(page=2, limit=10, published_only=True)
        assert len(second_page) == 5

        everything, all_pagination = await post_service.list_posts(page=1, limit=10, published_only=False)
        assert all_pagination.total == 20
        assert len(everything) == 10

    @pytest.mark.asyncio
    async def test_newest_first(self, post_service, admin):
        for title in ("Oldest", "Middle", "Newest"):
            await post_service.create(admin.id, title, "<p>x</p>", published=True)
        posts, _ = await post_service.list_posts()
        assert [p.title for p in posts] == ["Newest", "Middle", "Oldest"]

    @pytest.mark.asyncio
    async def test_posts_with_unresolved_author_are_skipped(self, db, post_service, admin, session_factory):
        await post_service.create(admin.id, "Kept", "<p>x</p>", published=True)
        orphan = await post_service.create(admin.id, "Orphaned", "<p>x</p>", published=True)
        await db.execute(update(Post).where(Post.id == orphan.id).values(author_id=9999))
        await db.commit()

        async with session_factory() as session:
            posts, pagination = await PostService(session).list_posts()
        assert [p.title for p in posts] == ["Kept"]
        assert pagination.total == 2

    @pytest.mark.asyncio
    async def test_empty_store(self, post_service):
        posts, pagination = await post_service.list_posts()
        assert posts == []
        assert pagination.total == 0
        assert pagination.pages == 0

    @pytest.mark.asyncio
    async def test_rejects_non_positive_page(self, post_service):
        with pytest.raises(BadRequestException):
            await post_service.list_posts(page=0)
