from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QMessageBox


def show_selectable_message_box(parent, title: str, text: str, icon=None, buttons=None,
                                details: Optional[str] = None):
    """
    Shows a modal QMessageBox whose text can be selected and copied.
    Optional details go into the expandable "Show Details" area.
    """
    msg = QMessageBox(parent)
    if title:
        msg.setWindowTitle(title)
    if text:
        msg.setText(text)
    if details:
        msg.setDetailedText(details)

    msg.setIcon(icon or QMessageBox.Icon.NoIcon)
    msg.setStandardButtons(buttons or QMessageBox.StandardButton.Ok)
    msg.setTextInteractionFlags(
        Qt.TextInteractionFlag.TextSelectableByMouse | Qt.TextInteractionFlag.LinksAccessibleByMouse
    )
    return msg.exec()
