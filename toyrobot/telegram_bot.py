"""Telegram bot interface for Toy Robot.

Every text message is one command line for the shared robot. REPORT
replies with the position; everything else is silent, the same as the
terminal.

Runs in the foreground (python -m toyrobot -telegram) instead of the
shell, so commands still arrive one at a time. There is one robot for the
whole bot: every chat drives the same router state, and messages from
different chats interleave in the order they are received.

Token: TELEGRAM_TOKEN in telegram_credentials.py (from @BotFather), or the
TOYROBOT_TELEGRAM_TOKEN environment variable. If neither is set,
run_telegram() logs a message and returns without error.
"""

import asyncio
import os
from telegram import Update
from telegram.ext import ApplicationBuilder, MessageHandler, filters, ContextTypes

from toyrobot.commands import router


def _log(msg):
    print(msg, flush=True)


async def _handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle an incoming Telegram message."""
    text = update.message.text
    if not text:
        return

    user = update.message.from_user
    username = user.first_name or user.username or "unknown"
    source = f"[Telegram:{username}]"

    _log(f"  {source} \"{text}\"")

    # A message may hold several lines; run them in order like a batch.
    for line in text.splitlines():
        response = router.dispatch(line, source=source)
        if response is not None:
            _log(f"  Response: \"{response}\"")
            await update.message.reply_text(response)


async def _run_bot_async(token):
    """Run the Telegram bot polling loop until cancelled."""
    app = ApplicationBuilder().token(token).build()
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, _handle_message))

    await app.initialize()
    await app.updater.start_polling(drop_pending_updates=True)
    await app.start()
    _log("Telegram bot started.")

    stop_event = asyncio.Event()
    try:
        await stop_event.wait()
    finally:
        await app.updater.stop()
        await app.stop()
        await app.shutdown()


def _get_token():
    try:
        from toyrobot.telegram_credentials import TELEGRAM_TOKEN
        return TELEGRAM_TOKEN
    except ImportError:
        return os.environ.get("TOYROBOT_TELEGRAM_TOKEN")


def run_telegram():
    """Run the Telegram bot (blocking).

    Returns True after a clean shutdown, False if skipped (no token).
    """
    token = _get_token()
    if not token:
        _log("No telegram_credentials.py or TOYROBOT_TELEGRAM_TOKEN; Telegram disabled.")
        return False

    try:
        asyncio.run(_run_bot_async(token))
    except KeyboardInterrupt:
        _log("\nShutting down.")
    return True
