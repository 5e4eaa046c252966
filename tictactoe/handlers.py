# tictactoe/handlers.py

from telegram import Update
from telegram.error import BadRequest
from telegram.ext import CallbackContext

from .game import TicTacToeGame, Won
from .utils import build_board, status_message

import logging
logger = logging.getLogger(__name__)


async def start(update: Update, context: CallbackContext):
    chat_id = update.effective_chat.id

    # one board per chat; older boards stop responding
    game = TicTacToeGame(chat_id=chat_id)
    context.chat_data["game"] = game
    logger.info("Game %s started in chat %s", game.id, chat_id)

    await update.message.reply_text(
        status_message(game.status),
        reply_markup=build_board(game)
    )


async def _current_game(query, context, game_id):
    game = context.chat_data.get("game")
    if game is None or game.id != game_id:
        await query.edit_message_text("This game has ended.")
        return None
    return game


async def _refresh(query, game):
    try:
        await query.edit_message_text(
            text=status_message(game.status),
            reply_markup=build_board(game)
        )
    except BadRequest as e:
        if "message is not modified" not in str(e).lower():
            raise
        logger.debug("Board for game %s already up to date", game.id)


async def make_move(update: Update, context: CallbackContext):
    query = update.callback_query
    await query.answer()

    try:
        _, index, game_id = query.data.split("_")
        index = int(index)
    except ValueError:
        return

    game = await _current_game(query, context, game_id)
    if game is None:
        return

    if not game.make_move(index):
        return

    status = game.status
    if isinstance(status, Won):
        logger.info("Game %s in chat %s won by %s", game.id, game.chat_id, status.player.value)
    elif game.is_over:
        logger.info("Game %s in chat %s ended in a draw", game.id, game.chat_id)

    await _refresh(query, game)


async def restart(update: Update, context: CallbackContext):
    query = update.callback_query
    await query.answer()

    try:
        _, game_id = query.data.split("_")
    except ValueError:
        return

    game = await _current_game(query, context, game_id)
    if game is None:
        return

    game.restart()
    logger.info("Game %s in chat %s restarted", game.id, game.chat_id)
    await _refresh(query, game)


async def noop(update: Update, context: CallbackContext):
    await update.callback_query.answer()


async def error_handler(update: object, context: CallbackContext):
    logger.error("Exception while handling an update:", exc_info=context.error)
