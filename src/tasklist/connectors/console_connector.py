# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
import sys

from ..cli.commands import Emitter, MenuRegistry, Prompt
from ..cli.commands import registry as menu_registry
from ..core.state import AppState
from ..errors import StorageError, ValidationError

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[2J\033[H"
CYAN = "\033[36m"
RESET = "\033[0m"


def _is_tty() -> bool:
    try:
        return sys.stdout.isatty()
    except Exception:
        return False


def _clear_screen() -> None:
    """Full-screen redraw. No-op when stdout is not a TTY."""
    if _is_tty():
        sys.stdout.write(CLEAR_SCREEN)
        sys.stdout.flush()


def _cyan(text: str) -> str:
    return f"{CYAN}{text}{RESET}" if _is_tty() else text


def welcome_message(emit: Emitter, app_name: str) -> None:
    emit("------------------------")
    emit(f"Welcome to the {_cyan(app_name)}!")
    emit("------------------------")
    emit("What would you like to do?")
    emit("")


def run_console_loop(
    state: AppState,
    *,
    prompt: Prompt = input,
    emit: Emitter = print,
    menu: MenuRegistry | None = None,
) -> None:
    """
    Main menu loop. Returns on Exit, end of input, or Ctrl+C.

    Store errors during an action return to the menu with a notice unless
    settings.abort_on_store_error is set, in which case they propagate.
    """
    menu = menu or menu_registry
    app_name = str(getattr(state.settings, "app_name", "Todo App"))
    abort_on_store_error = bool(getattr(state.settings, "abort_on_store_error", False))

    logger.info("Console shell started (abort_on_store_error=%s).", abort_on_store_error)

    notice: str | None = None
    while True:
        _clear_screen()
        welcome_message(emit, app_name)
        if notice:
            emit(notice)
            emit("")
            notice = None
        for line in menu.render():
            emit(line)

        try:
            choice = prompt("> ").strip() or menu.default_key or ""
            if not choice:
                continue
            if menu.is_exit(choice):
                logger.info("Console exit selected.")
                _clear_screen()
                break
            _clear_screen()
            notice = menu.handle(state, choice, prompt, emit)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            emit("")
            break
        except ValidationError as e:
            logger.debug("Rejected input: %s", e.detail)
            notice = e.detail
        except StorageError as e:
            if abort_on_store_error:
                logger.error("Store error (%s), aborting: %s", e.kind, e.detail)
                raise
            logger.exception("Store error during menu action.")
            notice = f"Storage error: {e.detail}"

    logger.info("Console shell finished.")
