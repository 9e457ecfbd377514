"""The main window of the Student Directory, switching between load views"""

import logging
from typing import override

from PyQt6.QtCore import Qt, QThread, QTimer
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from student_directory.config import settings
from student_directory.loader.directory_loader import DirectoryLoader, RecordSource
from student_directory.loader.errors import LoadError
from student_directory.models.load_state import Failed, Idle, Loaded, Loading, LoadState
from student_directory.models.record import Record
from student_directory.search.search_engine import SearchEngine
from student_directory.ui.widgets.load_worker import LoadWorker
from student_directory.ui.widgets.records_table import RecordsTable


class MainWindow(QMainWindow):
    """Shows a loading page, an error page with retry, or the directory"""

    logger: logging.Logger = logging.getLogger("Main Window")

    def __init__(self, source: RecordSource):
        super().__init__()
        self.setWindowTitle(settings.WINDOW_TITLE)
        self.setGeometry(100, 100, 1100, 750)
        self.setStyleSheet("background-color: #F3F4F6; color: #374151;")

        self.source: RecordSource = source
        self.loader: DirectoryLoader = DirectoryLoader(source)
        self.search_engine: SearchEngine = SearchEngine()
        self._records: tuple[Record, ...] = ()
        self.load_thread: QThread | None = None
        self.load_worker: LoadWorker | None = None

        # Debounce timer
        self._debounce_timer: QTimer = QTimer(self)
        self._debounce_timer.setSingleShot(True)
        self._debounce_timer.setInterval(settings.SEARCH_DEBOUNCE_MS)
        _ = self._debounce_timer.timeout.connect(self._refresh_results)

        self._stack: QStackedWidget = QStackedWidget()
        self._loading_page: QWidget = self._build_loading_page()
        self._error_page: QWidget = self._build_error_page()
        self._data_page: QWidget = self._build_data_page()
        for page in (self._loading_page, self._error_page, self._data_page):
            _ = self._stack.addWidget(page)
        self.setCentralWidget(self._stack)

        self.loader.add_listener(self._on_state_changed)
        self._on_state_changed(self.loader.state)

    def _build_loading_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        label = QLabel("Loading...")
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setStyleSheet("font-size: 20px; color: #4B5563;")
        layout.addWidget(label)
        return page

    def _build_error_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.setSpacing(24)

        self._error_label: QLabel = QLabel("")
        self._error_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._error_label.setWordWrap(True)
        self._error_label.setStyleSheet("font-size: 16px; color: #374151;")
        layout.addWidget(self._error_label)

        self._retry_button: QPushButton = QPushButton("Retry")
        self._retry_button.setStyleSheet("""
            QPushButton {
                background-color: #2563EB;
                color: #FFFFFF;
                border-radius: 8px;
                padding: 12px 32px;
                font-size: 14px;
            }
            QPushButton:hover {
                background-color: #3B82F6;
            }
        """)
        _ = self._retry_button.clicked.connect(self.retry)
        layout.addWidget(self._retry_button, alignment=Qt.AlignmentFlag.AlignCenter)
        return page

    def _build_data_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(48, 32, 48, 32)
        layout.setSpacing(16)

        title = QLabel(settings.WINDOW_TITLE)
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-size: 30px; font-weight: 600; color: #1F2937;")
        layout.addWidget(title)

        subtitle = QLabel(settings.WINDOW_SUBTITLE)
        subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        subtitle.setStyleSheet("font-size: 15px; color: #6B7280;")
        layout.addWidget(subtitle)

        search_label = QLabel("Search Students")
        search_label.setStyleSheet("font-size: 12px; font-weight: 500;")
        layout.addWidget(search_label)

        self._search_input: QLineEdit = QLineEdit()
        self._search_input.setPlaceholderText("Search by name, email or major...")
        self._search_input.setClearButtonEnabled(True)
        self._search_input.setStyleSheet("""
            QLineEdit {
                background-color: #F9FAFB;
                border: 1px solid #D1D5DB;
                border-radius: 6px;
                padding: 10px 14px;
                font-size: 14px;
            }
            QLineEdit:focus {
                border-color: #3B82F6;
            }
        """)
        _ = self._search_input.textChanged.connect(self._on_text_changed)
        layout.addWidget(self._search_input)

        self._table: RecordsTable = RecordsTable()
        layout.addWidget(self._table, stretch=1)
        return page

    def load(self) -> None:
        """Start fetching the directory on a background thread"""
        ticket = self.loader.begin()
        if ticket is None:
            return

        self.load_thread = QThread()
        self.load_worker = LoadWorker(ticket, self.source)
        self.load_worker.moveToThread(self.load_thread)

        # Connect signals
        _ = self.load_thread.started.connect(self.load_worker.run)
        _ = self.load_worker.finished.connect(self._on_load_finished)
        _ = self.load_worker.error.connect(self._on_load_error)

        # Cleanup connections
        _ = self.load_worker.finished.connect(self.load_thread.quit)
        _ = self.load_worker.error.connect(self.load_thread.quit)
        _ = self.load_thread.finished.connect(self.load_worker.deleteLater)
        _ = self.load_thread.finished.connect(self.load_thread.deleteLater)

        self.load_thread.start()

    def retry(self) -> None:
        """Retry button handler"""
        self.logger.debug("Retry requested")
        self.load()

    def _on_load_finished(self, ticket: int, records: tuple[Record, ...]) -> None:
        self.loader.complete(ticket, records)

    def _on_load_error(self, ticket: int, error: LoadError) -> None:
        self.loader.fail(ticket, error)

    def _on_state_changed(self, state: LoadState) -> None:
        match state:
            case Idle() | Loading():
                self._records = ()
                self._retry_button.setEnabled(False)
                self._stack.setCurrentWidget(self._loading_page)
            case Failed(message=message):
                self._error_label.setText(message)
                self._retry_button.setEnabled(True)
                self._stack.setCurrentWidget(self._error_page)
            case Loaded(records=records):
                self._records = records
                self._refresh_results()
                self._stack.setCurrentWidget(self._data_page)

    def _on_text_changed(self, _text: str) -> None:
        """Handle search input text change with debouncing"""
        self._debounce_timer.stop()
        self._debounce_timer.start()

    def _refresh_results(self) -> None:
        results = self.search_engine.search(self._records, self._search_input.text())
        self._table.show_results(results)

    @override
    def closeEvent(self, a0: QCloseEvent | None):
        """On app close event"""
        self.logger.debug("Close app event!")
        self._debounce_timer.stop()
        if self.load_worker is not None and self.loader.is_loading:
            self.load_worker.cancel()
        if self.load_thread is not None and self.loader.is_loading:
            self.load_thread.quit()
            _ = self.load_thread.wait(int(settings.REQUEST_TIMEOUT * 1000))
        if a0:
            a0.accept()
