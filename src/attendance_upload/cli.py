"""Command line front-end for the attendance upload workflow.

Interactive by default: prompts for the date range, credential and data,
asks for confirmation, then submits and shows the summary. Every field can
also be given as a flag for scripted use, together with ``--yes``.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import List, Optional

from .client import AiohttpTransport
from .config import Settings, load_settings
from .console import PortalConsole
from .csv_export import export_misc_records
from .logger import get_logger, set_log_profile, step, success
from .messages import t
from .models import EntryMode
from .orchestrator import SubmissionOrchestrator
from .presenter import View, render, show_export_action
from .state import AwaitingConfirmation, Failed, Succeeded
from .workflow import WorkflowController

logger = get_logger("cli")

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INVALID = 2


def _iso_date(value: str) -> str:
    try:
        date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD") from exc
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="attendance-upload",
        description="Submit attendance data for a date range to the processing service.",
    )
    parser.add_argument("--start", type=_iso_date, help="start date (YYYY-MM-DD)")
    parser.add_argument("--end", type=_iso_date, help="end date (YYYY-MM-DD)")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--file", type=Path, help="upload a .txt or .csv file")
    source.add_argument("--stdin", action="store_true", help="read manually entered data from stdin")
    parser.add_argument("--yes", action="store_true", help="confirm the submission without asking")
    parser.add_argument("--export", action="store_true", help="export misc records without asking")
    parser.add_argument("--export-dir", type=Path, help="directory for the misc records CSV")
    parser.add_argument("--api-url", help="override ATTENDANCE_API_URL")
    parser.add_argument("--env-file", help="path to the .env file (default: .env)")
    parser.add_argument(
        "--log-profile",
        choices=["quiet", "user", "debug", "verbose"],
        help="console verbosity (overrides LOG_PROFILE)",
    )
    return parser


class UploadSession:
    """Drive one or more submissions through a ``WorkflowController``."""

    def __init__(
        self,
        controller: WorkflowController,
        console: PortalConsole,
        args: argparse.Namespace,
        settings: Settings,
        *,
        interactive: bool,
    ) -> None:
        self.controller = controller
        self.console = console
        self.args = args
        self.settings = settings
        self.interactive = interactive

    # ------------------------------------------------------------------ form

    def _prompt_date(self, key: str, current: str) -> str:
        while True:
            raw = self.console.prompt(t(key), default=current)
            if not raw:
                return ""
            try:
                return _iso_date(raw)
            except argparse.ArgumentTypeError as exc:
                self.console.text_block(str(exc), tone="yellow")

    def _fill_from_args(self) -> None:
        args = self.args
        form = self.controller.form
        self.controller.set_dates(args.start or form.start_date, args.end or form.end_date)
        if not form.credential and self.settings.default_credential:
            self.controller.set_credential(self.settings.default_credential)
        if args.file is not None:
            self.controller.set_entry_mode(EntryMode.UPLOAD)
            self.controller.load_file(args.file)
        elif args.stdin:
            self.controller.set_entry_mode(EntryMode.MANUAL)
            self.controller.set_content(sys.stdin.read())

    def _edit_interactively(self, revisit: bool) -> None:
        """Prompt for missing fields, or for every field when ``revisit`` is set."""
        form = self.controller.form
        if revisit or not form.start_date or not form.end_date:
            self.console.headline(t("date_range_label"))
            start = self._prompt_date("start_date_prompt", form.start_date)
            end = self._prompt_date("end_date_prompt", form.end_date)
            self.controller.set_dates(start, end)
        if revisit or not form.credential:
            credential = self.console.prompt(t("credential_prompt"), secret=True)
            self.controller.set_credential(credential or form.credential)
        if revisit or not form.content_text:
            current = 1 if form.entry_mode is EntryMode.UPLOAD else 0
            choice = self.console.prompt_menu(
                t("entry_mode_label"), [t("mode_manual"), t("mode_upload")], default=current
            )
            if choice == 1:
                self.controller.set_entry_mode(EntryMode.UPLOAD)
                raw_path = self.console.prompt(t("file_prompt"))
                if raw_path:
                    self.controller.load_file(Path(raw_path).expanduser())
            else:
                self.controller.set_entry_mode(EntryMode.MANUAL)
                self.controller.set_content(self.console.prompt_multiline(t("manual_prompt")))

    def _show_form_error(self) -> None:
        render(self.console.console, self.controller.state, self.controller.form, self.controller.last_error)
        self.controller.last_error = None

    def _gate(self, revisit: bool) -> bool:
        """Loop until the form passes the gate; False when that cannot happen."""
        while True:
            if self.interactive:
                self._edit_interactively(revisit)
                revisit = False
            if self.controller.last_error:
                self._show_form_error()
                if not self.interactive:
                    return False
                continue
            self.controller.request_submit()
            if isinstance(self.controller.state, AwaitingConfirmation):
                return True
            self._show_form_error()
            if not self.interactive:
                return False

    # ------------------------------------------------------------------ flow

    async def _submit(self) -> bool:
        render(self.console.console, self.controller.state, self.controller.form)
        if not self.args.yes:
            if not self.interactive:
                logger.error(t("confirm_required"))
                self.controller.cancel()
                return False
            if not self.console.confirm(f"{t('confirm_yes')}? ({t('confirm_back')}: n)"):
                self.controller.cancel()
                return False
        step("Enviando datos a %s", self.settings.api_url)
        with self.console.console.status(f"{t('loading_title')} {t('loading_subtitle')}"):
            await self.controller.confirm()
        return True

    def _offer_export(self) -> None:
        state = self.controller.state
        if not isinstance(state, Succeeded) or not show_export_action(state):
            return
        if self.args.export or (
            self.interactive and self.console.confirm(f"{t('download_csv')}?", default=False)
        ):
            path = export_misc_records(state.result, self.args.export_dir or self.settings.export_dir)
            success("%s %s", t("csv_saved"), path)

    def _clear_args(self) -> None:
        self.args.start = self.args.end = None
        self.args.file = None
        self.args.stdin = False

    async def run(self) -> int:
        self.console.headline(t("app_title"))
        self._fill_from_args()
        revisit = False
        while True:
            if not self._gate(revisit):
                return EXIT_INVALID
            if not await self._submit():
                if not self.interactive:
                    return EXIT_FAILED
                revisit = True
                continue

            state = self.controller.state
            view = render(self.console.console, state, self.controller.form)
            if isinstance(state, Failed):
                if self.interactive and self.console.confirm(t("retry_prompt"), default=False):
                    revisit = True
                    continue
                return EXIT_FAILED

            self._offer_export()
            exit_code = EXIT_OK if view is View.SUCCESS else EXIT_FAILED
            if self.interactive and self.console.confirm(f"{t('upload_another')}?", default=False):
                self.controller.reset()
                self._clear_args()
                revisit = False
                continue
            return exit_code


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_profile:
        set_log_profile(args.log_profile)
    try:
        settings = load_settings(args.env_file)
    except ValueError as exc:
        logger.error("%s: %s", t("invalid_config"), exc)
        return EXIT_INVALID
    if args.api_url:
        settings = replace(settings, api_url=args.api_url)
    transport = AiohttpTransport(settings.api_url, timeout=settings.http_timeout)
    controller = WorkflowController(SubmissionOrchestrator(transport))
    interactive = sys.stdin.isatty() and not args.stdin
    session = UploadSession(controller, PortalConsole(), args, settings, interactive=interactive)
    try:
        return asyncio.run(session.run())
    except KeyboardInterrupt:
        logger.warning(t("interrupted"))
        return EXIT_FAILED
