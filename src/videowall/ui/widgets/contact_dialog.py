"""Contact / quote request dialog.

Opened either from "Help me choose" or "Request a Quote". Captures a
name and an email address or phone number; requests are stored locally.
"""

from PySide6.QtWidgets import (
    QButtonGroup,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from videowall.core.records import QuoteRequest, validate_contact
from videowall.core.session import WallSession


_TITLES = {
    "help": ("Need help choosing?", "Tell us about your project and we'll recommend the best configuration."),
    "quote": ("Request a Quote", "We'll send you a detailed quote for your selected configuration."),
}


class ContactDialog(QDialog):
    """Collects contact details and stores a QuoteRequest."""

    def __init__(self, session: WallSession, source: str | None, parent=None):
        super().__init__(parent)
        self._session = session
        self._quote: QuoteRequest | None = None

        title, subtitle = _TITLES.get(source, _TITLES["quote"])
        self.setWindowTitle(title)
        self.setMinimumWidth(420)

        layout = QVBoxLayout(self)
        sub = QLabel(subtitle)
        sub.setWordWrap(True)
        layout.addWidget(sub)

        form = QFormLayout()
        self._name_input = QLineEdit()
        form.addRow("Name *", self._name_input)
        self._name_error = self._error_label()
        form.addRow("", self._name_error)

        method_row = QWidget()
        method_layout = QHBoxLayout(method_row)
        method_layout.setContentsMargins(0, 0, 0, 0)
        self._email_radio = QRadioButton("Email")
        self._phone_radio = QRadioButton("Phone")
        self._email_radio.setChecked(True)
        self._method_group = QButtonGroup(self)
        self._method_group.addButton(self._email_radio)
        self._method_group.addButton(self._phone_radio)
        self._method_group.buttonClicked.connect(self._on_method_changed)
        method_layout.addWidget(self._email_radio)
        method_layout.addWidget(self._phone_radio)
        method_layout.addStretch()
        form.addRow("Contact by", method_row)

        self._contact_input = QLineEdit()
        self._contact_input.setPlaceholderText("you@example.com")
        form.addRow("Email / Phone *", self._contact_input)
        self._contact_error = self._error_label()
        form.addRow("", self._contact_error)
        layout.addLayout(form)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.button(QDialogButtonBox.StandardButton.Ok).setText("Submit")
        buttons.accepted.connect(self._submit)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    @staticmethod
    def _error_label() -> QLabel:
        label = QLabel("")
        label.setStyleSheet("color: #c0392b; font-size: 9pt;")
        label.setVisible(False)
        return label

    @property
    def quote(self) -> QuoteRequest | None:
        """The stored request, once the dialog was accepted."""
        return self._quote

    def _contact_method(self) -> str:
        return "phone" if self._phone_radio.isChecked() else "email"

    def _on_method_changed(self, button):
        self._contact_input.clear()
        self._contact_input.setPlaceholderText(
            "+1 (555) 123-4567" if self._contact_method() == "phone" else "you@example.com"
        )
        self._contact_error.setVisible(False)

    def _submit(self):
        name = self._name_input.text()
        method = self._contact_method()
        value = self._contact_input.text()

        errors = validate_contact(name, method, value)
        for key, label in (("name", self._name_error), ("contact", self._contact_error)):
            label.setText(errors.get(key, ""))
            label.setVisible(key in errors)
        if errors:
            return

        self._quote = self._session.submit_quote(name, method, value)
        self.accept()
