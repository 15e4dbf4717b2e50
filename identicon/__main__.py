import argparse
import sys
from typing import List, Optional

from identicon.config.constants import LOG_CONFIG
from identicon.config.settings import settings
from identicon.utils.logger_setup import setup_logging

logger = setup_logging(LOG_CONFIG["main_logger_name"])

from identicon.modules.identicon.identicon_service import create_identicon
from identicon.utils.request_logging import describe_input
from identicon.utils.session_context import new_session_id


def main(argv: Optional[List[str]] = None) -> int:
    """
    Генерирует identicon для каждой строки и сохраняет их в файлы.

    :param argv: Аргументы командной строки (по умолчанию sys.argv[1:]).
    :return: Код возврата процесса.
    """
    parser = argparse.ArgumentParser(
        prog="identicon", description="Generate identicon PNG files from strings"
    )
    parser.add_argument("texts", nargs="+", metavar="TEXT", help="input string")
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help=f"output directory (default: {settings.output_path})",
    )
    args = parser.parse_args(argv)

    for text in args.texts:
        # Логи каждой строки группируются под своим ID сессии
        new_session_id()
        try:
            path = create_identicon(text, args.output)
        except OSError as e:
            logger.error(
                f"Failed to save identicon for {describe_input(text)}: "
                f"{type(e).__name__}: {str(e)}"
            )
            return 1
        print(path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
