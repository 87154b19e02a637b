"""Tests for chat prompts."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from intentlayer.cli.prompts import ask_utterance


class TestAskUtterance:
    def test_returns_text(self):
        with patch("intentlayer.cli.prompts.Prompt.ask", return_value="Hello there"):
            assert ask_utterance() == "Hello there"

    def test_blank_is_returned(self):
        with patch("intentlayer.cli.prompts.Prompt.ask", return_value=""):
            assert ask_utterance() == ""

    @pytest.mark.parametrize("word", ["exit", "quit", "bye", "  EXIT  "])
    def test_exit_words(self, word):
        with patch("intentlayer.cli.prompts.Prompt.ask", return_value=word):
            assert ask_utterance() is None

    def test_exit_word_inside_sentence_is_kept(self):
        with patch("intentlayer.cli.prompts.Prompt.ask", return_value="how do I exit vim"):
            assert ask_utterance() == "how do I exit vim"

    def test_eof(self):
        with patch("intentlayer.cli.prompts.Prompt.ask", side_effect=EOFError):
            assert ask_utterance() is None

    def test_keyboard_interrupt(self):
        with patch("intentlayer.cli.prompts.Prompt.ask", side_effect=KeyboardInterrupt):
            assert ask_utterance() is None
