"""
Operator confirmation before the destination is cleared.
"""
import logging
from typing import Callable

logger = logging.getLogger(__name__)

CONFIRM_TOKEN = "yes"


def confirm_destination_clear(db_name: str, prompt: Callable[[str], str] = input) -> bool:
    """
    Ask the operator to confirm clearing the destination database.

    Only the exact answer "yes" proceeds. An unreadable answer (closed stdin,
    terminal error) counts as "no".
    """
    try:
        answer = prompt(f"database {db_name} will be cleared\nContinue? yes/No ")
    except (EOFError, OSError) as e:
        logger.warning(f"Could not read confirmation: {e!r}")
        return False

    return answer.strip() == CONFIRM_TOKEN
