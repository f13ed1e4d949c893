"""
Unit tests for clipboard integration.
"""

from unittest.mock import patch

import pyperclip
import pytest

from passgen.generator import generate_password
from passgen.utils.clipboard import copy_to_clipboard


class TestClipboardIntegration:
    """Test clipboard copy and delayed clearing."""

    @patch('pyperclip.copy')
    def test_clipboard_copy_success(self, mock_copy):
        """Test successful clipboard copying without clearing."""
        password = generate_password(length=16)

        assert copy_to_clipboard(password, clear_after=0) is None
        mock_copy.assert_called_once_with(password)

    @patch('passgen.utils.clipboard.time.sleep')
    @patch('pyperclip.paste')
    @patch('pyperclip.copy')
    def test_clipboard_auto_clear(self, mock_copy, mock_paste, mock_sleep):
        """Test clipboard is cleared after the delay."""
        password = generate_password(length=16)
        mock_paste.return_value = password

        thread = copy_to_clipboard(password, clear_after=60)
        thread.join(timeout=5)

        mock_sleep.assert_called_once_with(60)
        assert mock_copy.call_args_list[0][0] == (password,)
        assert mock_copy.call_args_list[-1][0] == ("",)

    @patch('passgen.utils.clipboard.time.sleep')
    @patch('pyperclip.paste')
    @patch('pyperclip.copy')
    def test_clipboard_not_cleared_when_replaced(self, mock_copy, mock_paste, mock_sleep):
        """Test clipboard content copied by the user afterwards is kept."""
        mock_paste.return_value = "something else"

        thread = copy_to_clipboard("secret-value", clear_after=1)
        thread.join(timeout=5)

        mock_copy.assert_called_once_with("secret-value")

    @patch('pyperclip.copy')
    def test_clipboard_copy_exception_handling(self, mock_copy):
        """Test clipboard failures propagate to the caller."""
        mock_copy.side_effect = pyperclip.PyperclipException("Clipboard access denied")

        with pytest.raises(pyperclip.PyperclipException):
            copy_to_clipboard("test-password")

    def test_generated_password_properties(self):
        """Test that generated passwords have expected properties for clipboard."""
        password = generate_password(length=20, require_punctuation=True)

        assert len(password) == 20
        assert password.isprintable()
        assert '\n' not in password
        assert '\t' not in password
