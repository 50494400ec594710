#!/usr/bin/env python3
"""wxPython entry point: opens the match list, or one match when an id is given."""

from __future__ import annotations

import argparse
import sys
import traceback

import wx
from loguru import logger

from controllers.match_details_controller import MatchDetailsViewModel
from services.match_details_service import MatchDetailsService
from utils.config import AppConfig, load_app_config
from utils.constants import LOGS_DIR, ensure_base_dirs
from utils.logging_config import configure_logging
from utils.navigation import parse_match_id


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse recorded MTG Arena matches.")
    parser.add_argument("--id", dest="match_id", help="Open the details of one match")
    parser.add_argument(
        "route",
        nargs="?",
        help="Navigation route or query string, e.g. '/match-details?id=42'",
    )
    return parser.parse_args(argv)


def resolve_start_match_id(args: argparse.Namespace) -> str | None:
    """``--id`` wins over a route argument; ``None`` means start at the match list."""
    if args.match_id:
        return str(args.match_id).strip() or None
    if args.route:
        return parse_match_id(args.route)
    return None


class MatchViewerApp(wx.App):
    """Bootstrap the match viewer windows."""

    def __init__(self, config: AppConfig, match_id: str | None = None) -> None:
        self.config = config
        self.start_match_id = match_id
        super().__init__(False)

    def OnInit(self) -> bool:  # noqa: N802 - wx override
        from widgets.match_details_frame import MatchDetailsFrame
        from widgets.match_list_frame import MatchListFrame

        logger.info("Starting MTGA Match Viewer (wx)")
        service = MatchDetailsService(config=self.config)
        if self.start_match_id:
            frame = MatchDetailsFrame(
                None, view_model=MatchDetailsViewModel(service=service), config=self.config
            )
            frame.Show()
            frame.load_match(self.start_match_id)
        else:
            frame = MatchListFrame(None, service=service, config=self.config)
            frame.Show()
        self.SetTopWindow(frame)
        return True

    def OnExceptionInMainLoop(self) -> bool:  # noqa: N802 - wx override
        """Handle exceptions in the main event loop."""
        exc_type, exc_value, exc_traceback = sys.exc_info()
        logger.error("=== UNHANDLED EXCEPTION IN MAIN LOOP ===")
        logger.error(f"Exception type: {exc_type.__name__}")
        logger.error(f"Exception value: {exc_value}")
        logger.error("Traceback:")
        for line in traceback.format_tb(exc_traceback):
            logger.error(line.rstrip())
        logger.error("=== END UNHANDLED EXCEPTION ===")

        error_msg = f"An unexpected error occurred:\n\n{exc_type.__name__}: {exc_value}\n\nCheck the log file for details."
        wx.MessageBox(error_msg, "Application Error", wx.OK | wx.ICON_ERROR)

        # Return True to continue running, False to exit
        return True


def global_exception_handler(exc_type, exc_value, exc_traceback) -> None:
    logger.error("=== UNCAUGHT EXCEPTION (GLOBAL) ===")
    logger.error(f"Exception type: {exc_type.__name__}")
    logger.error(f"Exception value: {exc_value}")
    logger.error("Traceback:")
    for line in traceback.format_tb(exc_traceback):
        logger.error(line.rstrip())
    logger.error("=== END UNCAUGHT EXCEPTION ===")

    sys.__excepthook__(exc_type, exc_value, exc_traceback)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    ensure_base_dirs()
    config = load_app_config()
    log_file = configure_logging(LOGS_DIR, level=config.log_level)
    if log_file:
        logger.info(f"Writing logs to {log_file}")

    sys.excepthook = global_exception_handler

    app = MatchViewerApp(config, match_id=resolve_start_match_id(args))
    app.MainLoop()


if __name__ == "__main__":
    main()
