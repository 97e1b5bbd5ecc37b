"""Sequential import of a manifest into Mattermost."""

import logging
import time
from typing import Callable, Dict, Optional

import requests
from ddtrace import tracer

from config import Config, ImportSettings
from mattermost_api import (
    DuplicateEmojiError,
    EmojiUploader,
    FetchError,
    UploadError,
    build_session,
    fetch_image,
    resolve_identity,
)
from utils import sanitize_emoji_name
from .report import ConsoleReporter, ImportReport, Outcome, OutcomeRecord

logger = logging.getLogger(__name__)


class EmojiImporter:
    """
    Import emojis one at a time.

    Entries are never processed in parallel: a fixed pause between two
    entries keeps the run under the server's rate limit.
    """

    def __init__(
        self,
        session: requests.Session,
        uploader: EmojiUploader,
        reporter: Optional[ConsoleReporter] = None,
        delay_seconds: float = Config.UPLOAD_DELAY_MS / 1000,
        timeout: float = Config.REQUEST_TIMEOUT,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.session = session
        self.uploader = uploader
        self.reporter = reporter or ConsoleReporter()
        self.delay_seconds = delay_seconds
        self.timeout = timeout
        self.sleep = sleep

    def process_entry(self, original_name: str, source: str) -> OutcomeRecord:
        """Run a single manifest entry to its final outcome."""
        name = sanitize_emoji_name(original_name)

        def record(outcome, status_code=None, detail=None):
            return OutcomeRecord(original_name, name, outcome, status_code, detail)

        # Aliases reference existing emojis, not image URLs
        if source.startswith(Config.ALIAS_PREFIX):
            return record(Outcome.ALIAS_SKIPPED)

        try:
            asset = fetch_image(self.session, source, timeout=self.timeout)
        except FetchError as e:
            return record(Outcome.FETCH_FAILED, e.status_code, str(e))

        try:
            self.uploader.upload_emoji(name, asset)
        except DuplicateEmojiError as e:
            return record(Outcome.DUPLICATE_SKIPPED, e.status_code, str(e))
        except UploadError as e:
            return record(Outcome.UPLOAD_FAILED, e.status_code, str(e))

        return record(Outcome.UPLOADED)

    @tracer.wrap(service=Config.DD_SERVICE, resource="import.run")
    def run(self, manifest: Dict[str, str]) -> ImportReport:
        report = ImportReport()
        self.reporter.start(len(manifest))

        for index, (original_name, source) in enumerate(manifest.items()):
            if index:
                # Brief pause to avoid triggering rate limits
                self.sleep(self.delay_seconds)

            result = self.process_entry(original_name, source)
            logger.debug(
                f"[IMPORT] {original_name!r} -> {result.sanitized_name!r}: {result.outcome.value}"
            )
            report.add(result)
            self.reporter.entry(result)

        self.reporter.finish(report)
        logger.info(
            f"[IMPORT] Finished: {len(report.records)} entries, {report.failed} failed"
        )
        return report


def run_import(
    settings: ImportSettings,
    manifest: Dict[str, str],
    reporter: Optional[ConsoleReporter] = None,
) -> ImportReport:
    """
    Resolve the token owner, then import every manifest entry.

    Raises:
        IdentityError: If the token cannot be resolved; nothing is uploaded then
    """
    session = build_session()
    try:
        principal = resolve_identity(
            session, settings.server_url, settings.token, timeout=settings.timeout
        )
        uploader = EmojiUploader(
            session,
            settings.server_url,
            settings.token,
            principal,
            timeout=settings.timeout,
        )
        importer = EmojiImporter(
            session,
            uploader,
            reporter=reporter,
            delay_seconds=settings.delay_seconds,
            timeout=settings.timeout,
        )
        return importer.run(manifest)
    finally:
        session.close()
