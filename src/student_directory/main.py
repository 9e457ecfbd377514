"""
The main file that starts the Student Directory PyQt6 application
"""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from student_directory.config import settings
from student_directory.loader.client import CollectionClient
from student_directory.logger import configure_logging
from student_directory.ui.main_window import MainWindow


def main() -> int:
    configure_logging()
    logging.debug("Starting the application...")

    app = QApplication(sys.argv)
    client = CollectionClient(settings.DIRECTORY_ENDPOINT, settings.REQUEST_TIMEOUT)

    try:
        main_window = MainWindow(client)
        main_window.show()
        main_window.load()
        return app.exec()
    except Exception as e:  # pylint: disable=broad-exception-caught
        logging.getLogger("MainWindow").error("Uncaught exception: %s", e)
        return 1
    finally:
        client.close()


if __name__ == "__main__":
    sys.exit(main())
