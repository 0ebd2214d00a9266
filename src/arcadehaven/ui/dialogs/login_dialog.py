"""LoginDialog — sign in or create an account."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QVBoxLayout,
    QWidget,
)

from arcadehaven.services.errors import ServiceError
from arcadehaven.services.interfaces import IAuthService
from arcadehaven.services.models import AuthSession
from arcadehaven.ui.i18n import t

_LOGGER = logging.getLogger(__name__)

MODE_LOGIN = 0
MODE_REGISTER = 1


class LoginDialog(QDialog):
    """Modal sign-in form; talks to *auth* directly on accept."""

    def __init__(self, auth: IAuthService, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumWidth(360)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )
        self._auth = auth
        self._session: AuthSession | None = None
        self._setup_ui()
        self.retranslate_ui()
        self._sync_mode()

    def _setup_ui(self) -> None:
        main = QVBoxLayout(self)

        self._combo_mode = QComboBox()
        self._combo_mode.currentIndexChanged.connect(self._sync_mode)
        main.addWidget(self._combo_mode)

        self._form = QFormLayout()
        self._form.setSpacing(10)
        self._lbl_identity = QLabel()
        self._edit_identity = QLineEdit()
        self._form.addRow(self._lbl_identity, self._edit_identity)
        self._lbl_email = QLabel()
        self._edit_email = QLineEdit()
        self._form.addRow(self._lbl_email, self._edit_email)
        self._lbl_password = QLabel()
        self._edit_password = QLineEdit()
        self._edit_password.setEchoMode(QLineEdit.EchoMode.Password)
        self._form.addRow(self._lbl_password, self._edit_password)
        main.addLayout(self._form)

        self._message = QLabel()
        self._message.setWordWrap(True)
        main.addWidget(self._message)

        self._buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        self._buttons.accepted.connect(self._on_accept)
        self._buttons.rejected.connect(self.reject)
        main.addWidget(self._buttons)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.login_title)
        current = self._combo_mode.currentIndex()
        self._combo_mode.blockSignals(True)
        self._combo_mode.clear()
        self._combo_mode.addItems([s.login_mode_login, s.login_mode_register])
        self._combo_mode.setCurrentIndex(max(0, current))
        self._combo_mode.blockSignals(False)
        self._lbl_email.setText(s.login_email)
        self._lbl_password.setText(s.login_password)
        self._sync_mode()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def session(self) -> AuthSession | None:
        return self._session

    @property
    def message_text(self) -> str:
        return self._message.text()

    def set_mode(self, mode: int) -> None:
        self._combo_mode.setCurrentIndex(mode)

    def fill(self, identity: str, password: str, email: str = "") -> None:
        self._edit_identity.setText(identity)
        self._edit_email.setText(email)
        self._edit_password.setText(password)

    @staticmethod
    def ask(auth: IAuthService, parent: QWidget | None = None) -> AuthSession | None:
        dlg = LoginDialog(auth, parent)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            return dlg.session
        return None

    # ── Internal ─────────────────────────────────────────────────────────

    def _is_register(self) -> bool:
        return self._combo_mode.currentIndex() == MODE_REGISTER

    def _sync_mode(self) -> None:
        s = t()
        register = self._is_register()
        self._lbl_identity.setText(s.login_username if register else s.login_identity)
        self._lbl_email.setVisible(register)
        self._edit_email.setVisible(register)

    def _on_accept(self) -> None:
        identity = self._edit_identity.text().strip()
        password = self._edit_password.text()
        try:
            if self._is_register():
                user = self._auth.register(identity, self._edit_email.text().strip(), password)
                self._message.setText(t().register_done.format(name=user.username))
                self.set_mode(MODE_LOGIN)
                return
            self._session = self._auth.login(identity, password)
        except ServiceError as exc:
            _LOGGER.info("Authentication failed for %r: %s", identity, exc)
            self._message.setText(t().login_failed.format(msg=exc))
            return
        self.accept()
