"""Tests for the sign-in dialog."""

from __future__ import annotations

import pytest
from PyQt6.QtWidgets import QDialog, QDialogButtonBox

from arcadehaven.services.memory import InMemoryAuthService
from arcadehaven.ui.dialogs.login_dialog import MODE_LOGIN, MODE_REGISTER, LoginDialog


def _press_ok(dlg: LoginDialog) -> None:
    button = dlg._buttons.button(QDialogButtonBox.StandardButton.Ok)
    assert button is not None
    button.click()


@pytest.fixture
def auth() -> InMemoryAuthService:
    service = InMemoryAuthService()
    service.register("alice", "alice@example.com", "secret1")
    return service


@pytest.mark.usefixtures("qapp")
class TestLoginDialog:
    def test_login_mode_hides_email(self, auth: InMemoryAuthService) -> None:
        dlg = LoginDialog(auth)
        assert dlg._edit_email.isHidden()
        dlg.set_mode(MODE_REGISTER)
        assert not dlg._edit_email.isHidden()

    def test_successful_login_accepts(self, auth: InMemoryAuthService) -> None:
        dlg = LoginDialog(auth)
        dlg.fill("alice", "secret1")
        _press_ok(dlg)
        assert dlg.result() == QDialog.DialogCode.Accepted
        assert dlg.session is not None
        assert auth.current_user is not None
        assert auth.current_user.username == "alice"

    def test_bad_password_shows_message(self, auth: InMemoryAuthService) -> None:
        dlg = LoginDialog(auth)
        dlg.fill("alice", "wrong")
        _press_ok(dlg)
        assert dlg.session is None
        assert dlg.message_text == "Sign-in failed: Invalid credentials."
        assert dlg.result() != QDialog.DialogCode.Accepted

    def test_register_then_login(self, auth: InMemoryAuthService) -> None:
        dlg = LoginDialog(auth)
        dlg.set_mode(MODE_REGISTER)
        dlg.fill("carol", "pw123", email="carol@example.com")
        _press_ok(dlg)
        assert "Account created for carol" in dlg.message_text
        assert dlg._combo_mode.currentIndex() == MODE_LOGIN
        _press_ok(dlg)
        assert dlg.session is not None
        assert dlg.session.user.username == "carol"

    def test_register_validation_error(self, auth: InMemoryAuthService) -> None:
        dlg = LoginDialog(auth)
        dlg.set_mode(MODE_REGISTER)
        dlg.fill("al", "pw", email="al@example.com")
        _press_ok(dlg)
        assert dlg.message_text.startswith("Sign-in failed: Username must be between")
