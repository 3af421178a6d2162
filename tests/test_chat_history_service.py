"""Unit tests for the chat history log."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from datetime import datetime
from unittest.mock import MagicMock
from sqlalchemy.exc import OperationalError
from app.services.chat_history_service import clear_chat_history, get_chat_history, save_chat_message


class TestChatHistory:
    def test_default_session_is_today(self, db):
        message = save_chat_message(db, 1, "user", "hello")
        assert message.session_id == datetime.utcnow().date().isoformat()

    def test_explicit_session(self, db):
        assert save_chat_message(db, 1, "user", "hello", session_id="shift-a").session_id == "shift-a"

    def test_history_ascending_and_limited(self, db):
        for i in range(5):
            save_chat_message(db, 1, "user", f"m{i}")
        save_chat_message(db, 2, "user", "other conductor")

        assert [m.content for m in get_chat_history(db, 1)] == ["m0", "m1", "m2", "m3", "m4"]
        assert [m.content for m in get_chat_history(db, 1, limit=2)] == ["m0", "m1"]

    def test_clear(self, db):
        save_chat_message(db, 1, "user", "a")
        save_chat_message(db, 1, "assistant", "b")
        save_chat_message(db, 2, "user", "c")

        assert clear_chat_history(db, 1) == 2
        assert get_chat_history(db, 1) == []
        assert len(get_chat_history(db, 2)) == 1

    def test_save_failure_is_swallowed(self):
        db = MagicMock()
        db.commit.side_effect = OperationalError("INSERT", {}, Exception("db down"))
        assert save_chat_message(db, 1, "user", "hello") is None
        db.rollback.assert_called_once()
