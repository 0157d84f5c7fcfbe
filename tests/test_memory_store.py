"""Tests for MemoryStore CRUD operations."""

from datetime import datetime, timedelta, timezone

import pytest

from lumochat.domain.exceptions import NotFoundError
from lumochat.schemas import InsertConversation, InsertMessage, InsertUser
from lumochat.storage.memory_store import MemoryStore


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self):
        self.now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, seconds=1.0):
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return MemoryStore(clock=clock)


def _msg(conversation_id, content, role="user"):
    return InsertMessage(conversation_id=conversation_id, role=role, content=content)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

class TestUsers:
    def test_create_and_get(self, store):
        user = store.create_user(InsertUser(username="ana", password="pw"))
        assert user.id
        assert store.get_user(user.id) == user

    def test_get_unknown_returns_none(self, store):
        assert store.get_user("nope") is None

    def test_get_by_username(self, store):
        store.create_user(InsertUser(username="ana", password="pw"))
        bob = store.create_user(InsertUser(username="bob", password="pw"))
        assert store.get_user_by_username("bob") == bob

    def test_get_by_username_no_match(self, store):
        store.create_user(InsertUser(username="ana", password="pw"))
        assert store.get_user_by_username("zed") is None

    def test_ids_are_unique(self, store):
        ids = {store.create_user(InsertUser(username=f"u{i}", password="x")).id for i in range(50)}
        assert len(ids) == 50


# ---------------------------------------------------------------------------
# Conversation CRUD
# ---------------------------------------------------------------------------

class TestConversations:
    def test_create_and_get(self, store, clock):
        conv = store.create_conversation(InsertConversation(mode="chat", title="t"))
        fetched = store.get_conversation(conv.id)
        assert fetched is not None
        assert fetched.mode == "chat"
        assert fetched.title == "t"
        assert fetched.created_at == clock.now

    def test_created_at_within_call_window(self):
        store = MemoryStore()
        before = datetime.now(timezone.utc)
        conv = store.create_conversation(InsertConversation(mode="chat", title="t"))
        after = datetime.now(timezone.utc)
        assert before <= conv.created_at <= after

    def test_title_defaults_to_none(self, store):
        conv = store.create_conversation(InsertConversation(mode="chat"))
        assert conv.title is None

    def test_empty_title_becomes_none(self, store):
        conv = store.create_conversation(InsertConversation(mode="chat", title=""))
        assert conv.title is None

    def test_get_nonexistent(self, store):
        assert store.get_conversation("nope") is None

    def test_list_newest_first(self, store, clock):
        first = store.create_conversation(InsertConversation(mode="chat", title="first"))
        clock.advance()
        second = store.create_conversation(InsertConversation(mode="chat", title="second"))
        clock.advance()
        third = store.create_conversation(InsertConversation(mode="chat", title="third"))
        assert [c.id for c in store.get_conversations()] == [third.id, second.id, first.id]

    def test_list_orders_by_created_at_not_insertion(self, store, clock):
        clock.advance(10)
        late = store.create_conversation(InsertConversation(mode="chat", title="late"))
        clock.now -= timedelta(seconds=5)
        early = store.create_conversation(InsertConversation(mode="chat", title="early"))
        assert [c.id for c in store.get_conversations()] == [late.id, early.id]

    def test_list_equal_created_at_keeps_insertion_order(self, store):
        a = store.create_conversation(InsertConversation(mode="chat", title="a"))
        b = store.create_conversation(InsertConversation(mode="chat", title="b"))
        assert [c.id for c in store.get_conversations()] == [a.id, b.id]

    def test_list_empty(self, store):
        assert store.get_conversations() == []


# ---------------------------------------------------------------------------
# Message persistence
# ---------------------------------------------------------------------------

class TestMessages:
    def test_create_stamps_id_and_timestamp(self, store, clock):
        msg = store.create_message(_msg("c1", "hi"))
        assert msg.id
        assert msg.timestamp == clock.now
        assert msg.conversation_id == "c1"
        assert msg.role == "user"

    def test_ascending_by_timestamp(self, store, clock):
        a = store.create_message(_msg("c1", "a"))
        clock.advance()
        b = store.create_message(_msg("c1", "b", role="assistant"))
        clock.advance()
        c = store.create_message(_msg("c1", "c"))
        assert [m.id for m in store.get_messages("c1")] == [a.id, b.id, c.id]

    def test_equal_timestamps_keep_call_order(self, store):
        created = [store.create_message(_msg("c1", str(i))) for i in range(10)]
        assert [m.id for m in store.get_messages("c1")] == [m.id for m in created]

    def test_sorted_even_when_clock_goes_backwards(self, store, clock):
        clock.advance(10)
        later = store.create_message(_msg("c1", "later"))
        clock.now -= timedelta(seconds=5)
        earlier = store.create_message(_msg("c1", "earlier"))
        assert [m.id for m in store.get_messages("c1")] == [earlier.id, later.id]

    def test_filters_by_conversation(self, store):
        store.create_message(_msg("c1", "one"))
        store.create_message(_msg("c2", "two"))
        messages = store.get_messages("c1")
        assert [m.content for m in messages] == ["one"]

    def test_unknown_conversation_is_empty(self, store):
        assert store.get_messages("nope") == []

    def test_orphan_messages_accepted_by_default(self, store):
        msg = store.create_message(_msg("never-created", "hi"))
        assert store.get_messages("never-created") == [msg]


class TestStrictConversationRefs:
    def test_rejects_unknown_conversation(self):
        store = MemoryStore(enforce_conversation_refs=True)
        with pytest.raises(NotFoundError):
            store.create_message(_msg("nope", "hi"))
        assert store.get_messages("nope") == []

    def test_accepts_existing_conversation(self):
        store = MemoryStore(enforce_conversation_refs=True)
        conv = store.create_conversation(InsertConversation(mode="chat"))
        msg = store.create_message(_msg(conv.id, "hi"))
        assert store.get_messages(conv.id) == [msg]

    def test_rejects_after_delete(self):
        store = MemoryStore(enforce_conversation_refs=True)
        conv = store.create_conversation(InsertConversation(mode="chat"))
        store.delete_conversation(conv.id)
        with pytest.raises(NotFoundError):
            store.create_message(_msg(conv.id, "hi"))


# ---------------------------------------------------------------------------
# Deletion
# ---------------------------------------------------------------------------

class TestDelete:
    def test_delete_cascades_messages(self, store):
        conv = store.create_conversation(InsertConversation(mode="chat"))
        store.create_message(_msg(conv.id, "a"))
        store.create_message(_msg(conv.id, "b", role="assistant"))
        store.delete_conversation(conv.id)
        assert store.get_conversation(conv.id) is None
        assert store.get_messages(conv.id) == []

    def test_delete_leaves_other_conversations(self, store):
        keep = store.create_conversation(InsertConversation(mode="chat"))
        drop = store.create_conversation(InsertConversation(mode="chat"))
        kept = store.create_message(_msg(keep.id, "keep"))
        store.create_message(_msg(drop.id, "drop"))
        store.delete_conversation(drop.id)
        assert store.get_messages(keep.id) == [kept]
        assert [c.id for c in store.get_conversations()] == [keep.id]

    def test_delete_unknown_is_noop(self, store):
        store.delete_conversation("nope")
        assert store.get_messages("nope") == []

    def test_delete_twice(self, store):
        conv = store.create_conversation(InsertConversation(mode="chat"))
        store.delete_conversation(conv.id)
        store.delete_conversation(conv.id)
        assert store.get_conversation(conv.id) is None

    def test_delete_removes_orphans_too(self, store):
        store.create_message(_msg("ghost", "hi"))
        store.delete_conversation("ghost")
        assert store.get_messages("ghost") == []


class TestStats:
    def test_counts(self, store):
        store.create_user(InsertUser(username="ana", password="pw"))
        conv = store.create_conversation(InsertConversation(mode="chat"))
        store.create_message(_msg(conv.id, "a"))
        assert store.stats() == {"users": 1, "conversations": 1, "messages": 1}


def test_satisfies_storage_port():
    from lumochat.application.ports.storage_port import StoragePort

    assert isinstance(MemoryStore(), StoragePort)
