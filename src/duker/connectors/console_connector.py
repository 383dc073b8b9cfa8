# src/duker/connectors/console_connector.py

from __future__ import annotations

import logging

from ..core.session import Session

logger = logging.getLogger(__name__)

PROMPT = "> "


def run_console_loop(session: Session) -> None:
    logger.info("Console connector started.")

    print(session.get_greeting())
    for message in session.state.startup_messages:
        print(message)

    while session.online:
        try:
            user_input = input(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        print(session.get_response(user_input), end="", flush=True)

    logger.info("Console connector finished.")
