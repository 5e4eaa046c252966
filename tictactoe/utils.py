# tictactoe/utils.py

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from .game import Draw, Mark, Won

SYMBOLS = {Mark.X: "❌", Mark.O: "⭕", None: "⬜"}


def status_message(status):
    if isinstance(status, Won):
        return f"Winner: {Mark(status.player).value}"
    if isinstance(status, Draw):
        return "It's a draw!"
    return f"Current Player: {Mark(status.next_player).value}"


def cell_text(mark, highlighted=False):
    symbol = SYMBOLS[mark]
    if highlighted:
        return f"[{symbol}]"
    return symbol


def cell_action(game, index):
    # filled cells and finished games keep their buttons but never reach the engine
    if game.is_over or game.board[index] is not None:
        return "noop"
    return "move"


def build_board(game):
    board = game.board
    gid = game.id
    status = game.status

    winning_line = status.line if isinstance(status, Won) else ()

    buttons = []
    for i in range(0, 9, 3):
        row = [
            InlineKeyboardButton(
                cell_text(board[j], j in winning_line),
                callback_data=f"{cell_action(game, j)}_{j}_{gid}",
            )
            for j in range(i, i + 3)
        ]
        buttons.append(row)

    buttons.append([InlineKeyboardButton("🔄 Restart", callback_data=f"restart_{gid}")])
    return InlineKeyboardMarkup(buttons)
