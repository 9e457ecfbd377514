"""Fetch the directory on another thread"""

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from student_directory.loader.directory_loader import RecordSource
from student_directory.loader.errors import LoadError, UnexpectedError


class LoadWorker(QObject):
    """Worker that fetches the record collection in a separate thread"""

    # Signals
    finished: pyqtSignal = pyqtSignal(int, tuple)  # (ticket, records)
    error: pyqtSignal = pyqtSignal(int, object)  # (ticket, LoadError)

    def __init__(self, ticket: int, source: RecordSource):
        super().__init__()
        self.ticket: int = ticket
        self.source: RecordSource = source
        self._is_cancelled: bool = False
        self.logger: logging.Logger = logging.getLogger("LoadWorker")

    def run(self):
        """Main work function"""
        if self._is_cancelled:
            return

        self.logger.debug("Fetching records for load cycle %d...", self.ticket)
        try:
            records = self.source.fetch_records()
        except LoadError as e:
            if not self._is_cancelled:
                self.error.emit(self.ticket, e)
            return
        except Exception as e:  # pylint: disable=broad-exception-caught
            self.logger.exception("Unexpected error while fetching records")
            if not self._is_cancelled:
                self.error.emit(self.ticket, UnexpectedError(e))
            return

        if not self._is_cancelled:
            self.finished.emit(self.ticket, records)

    def cancel(self):
        """Cancel the operation"""
        self._is_cancelled = True
