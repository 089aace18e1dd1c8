import locale
import sys
from PySide6.QtWidgets import QApplication

from movieList.utils           import apply_dark_palette, log_debug
from movieList.gui.main_window import MainWindow


# ────────────────────────────────────────────────────────────────────────────
# Application entry
# ────────────────────────────────────────────────────────────────────────────
def main() -> None:
    # title / description sorting collates with the user's locale
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        log_debug(f"locale: falling back to C collation ({e})")

    app = QApplication(sys.argv)
    apply_dark_palette(app)

    # the window starts the first fetch itself once it is shown
    window = MainWindow()
    window.show()

    # -------- run the event-loop -------------------------------------
    sys.exit(app.exec())

# Python entry-point guard
if __name__ == "__main__":
    main()
