from datetime import datetime

from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtGui     import QColor, QPalette # type: ignore
from PySide6.QtWidgets import QApplication # type: ignore

from movieList.settings import LOG_PATH, ACCENT_COLOR


def log_debug(message: str) -> None:
    """Append timestamped message to the log file; never raises on I/O errors."""
    ts = datetime.now().isoformat(timespec="seconds")
    try:
        LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        with LOG_PATH.open("a", encoding="utf-8") as f:
            f.write(f"[{ts}] {message}\n")
    except OSError:
        pass        # best effort


# palette role → colour for the list window
_DARK_ROLES = {
    QPalette.Window:        "#1b1c1f",
    QPalette.WindowText:    "#f1f1f1",
    QPalette.Base:          "#24262a",
    QPalette.AlternateBase: "#2c2e33",
    QPalette.Button:        "#2a2c30",
    QPalette.ButtonText:    "#f1f1f1",
    QPalette.Text:          "#f1f1f1",
}


def apply_dark_palette(app: QApplication, accent: str = ACCENT_COLOR) -> None:
    """Fusion style with a dark palette; *accent* tints links and selection."""
    palette = QPalette()
    for role, colour in _DARK_ROLES.items():
        palette.setColor(role, QColor(colour))
    for role in (QPalette.Link, QPalette.Highlight):
        palette.setColor(role, QColor(accent))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    app.setStyle("Fusion")
    app.setPalette(palette)
