from .orchestrator import EmojiImporter, run_import
from .report import ConsoleReporter, ImportReport, Outcome, OutcomeRecord

__all__ = [
    "EmojiImporter",
    "run_import",
    "ConsoleReporter",
    "ImportReport",
    "Outcome",
    "OutcomeRecord",
]
