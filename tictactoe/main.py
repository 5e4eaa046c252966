# tictactoe/main.py
import logging
from telegram.ext import Application, CommandHandler, CallbackQueryHandler
from .config import BOT_TOKEN, LOG_LEVEL
from .handlers import start, make_move, restart, noop, error_handler

logger = logging.getLogger(__name__)


def build_application(token):
    # updates are handled one at a time, so a game never sees two moves at once
    app = Application.builder().token(token).build()

    app.add_handler(CommandHandler(["start", "new"], start))
    app.add_handler(CallbackQueryHandler(make_move, pattern=r"^move_\d_[-\w]+$"))
    app.add_handler(CallbackQueryHandler(restart, pattern=r"^restart_[-\w]+$"))
    app.add_handler(CallbackQueryHandler(noop, pattern=r"^noop_"))
    app.add_error_handler(error_handler)
    return app


def main():
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=LOG_LEVEL
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    app = build_application(BOT_TOKEN)

    logger.info("Bot started!")
    app.run_polling(allowed_updates=["message", "callback_query"])


if __name__ == "__main__":
    main()
