"""Entry point for the Bill Generator desktop app."""

from PyQt5.QtWidgets import QApplication
import sys

from billgen.ui.main_window import MainWindow


def main() -> None:
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
