"""Tests for the Telegram message handler, using stand-in update objects."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock

from toyrobot import telegram_bot
from toyrobot.commands import router
from toyrobot.state import UNPLACED


def _update(text):
    message = SimpleNamespace(
        text=text,
        from_user=SimpleNamespace(first_name="Ada", username="ada"),
        reply_text=AsyncMock(),
    )
    return SimpleNamespace(message=message)


def _send(text):
    update = _update(text)
    asyncio.run(telegram_bot._handle_message(update, None))
    return update.message.reply_text


def test_report_replies():
    _send("PLACE 2,3,WEST")
    reply = _send("REPORT")
    reply.assert_awaited_once_with("2,3,WEST")


def test_silent_commands_do_not_reply():
    assert not _send("PLACE 2,3,WEST").called
    assert not _send("MOVE").called
    assert not _send("FOO").called


def test_multiline_message_runs_in_order():
    reply = _send("PLACE 1,2,EAST\nMOVE\nMOVE\nLEFT\nMOVE\nREPORT")
    reply.assert_awaited_once_with("3,3,NORTH")


def test_empty_message_ignored():
    assert not _send("").called
    assert router.state is UNPLACED


def test_source_tag_logged(tmp_path):
    _send("PLACE 0,0,NORTH")
    assert "[Telegram:Ada]  PLACE 0,0,NORTH" in (tmp_path / "toyrobot.log").read_text()


def test_no_token_skips(monkeypatch):
    monkeypatch.delenv("TOYROBOT_TELEGRAM_TOKEN", raising=False)
    monkeypatch.setattr(telegram_bot, "_get_token", lambda: None)
    assert telegram_bot.run_telegram() is False


def test_chats_share_one_robot():
    first = _update("PLACE 1,1,NORTH")
    second = _update("REPORT")
    second.message.from_user = SimpleNamespace(first_name="Grace", username="grace")
    asyncio.run(telegram_bot._handle_message(first, None))
    asyncio.run(telegram_bot._handle_message(second, None))
    second.message.reply_text.assert_awaited_once_with("1,1,NORTH")
