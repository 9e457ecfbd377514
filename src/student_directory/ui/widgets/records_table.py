"""Table showing the filtered, highlighted records"""

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QHeaderView,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QWidget,
)

from student_directory.search.search_engine import SearchField, SearchResult
from student_directory.ui.formatting import format_date, or_na, segments_to_html

HEADERS: list[str] = ["Name", "Email", "Major", "Stage", "Level", "Created At"]
EMPTY_MESSAGE: str = "No students found."


class RecordsTable(QTableWidget):
    """
    Read-only table of search results.

    Name, email and major are rendered as rich text labels so the matched
    part of the search term can be highlighted.
    """

    def __init__(self, parent: QWidget | None = None):
        super().__init__(0, len(HEADERS), parent)
        self.logger: logging.Logger = logging.getLogger("RecordsTable")
        self.setHorizontalHeaderLabels(HEADERS)
        self.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.setAlternatingRowColors(True)
        self.verticalHeader().setVisible(False)
        header = self.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self.setStyleSheet("""
            QTableWidget {
                background-color: #FFFFFF;
                alternate-background-color: #F9FAFB;
                border: 1px solid #E5E7EB;
                color: #1F2937;
                font-size: 13px;
            }
            QHeaderView::section {
                background-color: #F3F4F6;
                border: none;
                border-bottom: 1px solid #E5E7EB;
                padding: 8px;
                font-weight: 600;
                color: #374151;
            }
        """)

    def show_results(self, results: list[SearchResult]) -> None:
        """Replace the table content with `results`"""
        self.logger.debug("Showing %d results", len(results))
        self.clearSpans()
        self.setRowCount(0)

        if not results:
            self._show_empty()
            return

        self.setRowCount(len(results))
        for row, result in enumerate(results):
            record = result.record
            for column, field in enumerate(SearchField):
                self.setCellWidget(
                    row, column, self._rich_label(result, field)
                )
            self.setItem(row, 3, self._plain_item(or_na(record.stage)))
            self.setItem(row, 4, self._plain_item(or_na(record.level)))
            self.setItem(row, 5, self._plain_item(format_date(record.created_at)))

    def _show_empty(self) -> None:
        self.setRowCount(1)
        item = self._plain_item(EMPTY_MESSAGE)
        item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setItem(0, 0, item)
        self.setSpan(0, 0, 1, len(HEADERS))

    def _rich_label(self, result: SearchResult, field: SearchField) -> QLabel:
        label = QLabel(segments_to_html(result.segments[field]))
        label.setTextFormat(Qt.TextFormat.RichText)
        label.setContentsMargins(8, 0, 8, 0)
        if field is SearchField.MAJOR and not field.value_of(result.record):
            label.setText(or_na(None))
        return label

    @staticmethod
    def _plain_item(text: str) -> QTableWidgetItem:
        return QTableWidgetItem(text)
