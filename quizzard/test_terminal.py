from __future__ import annotations

import curses
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from quizzard.keys import BACKSPACE, DOWN, ENTER, OTHER, UP, Key, decode
from quizzard.logstore import LogStore
from quizzard.models import DeviceIOError, OptionList, ValidationError
from quizzard.multiselect import MultiSelect
from quizzard.scripted import ScriptedTerminal
from quizzard.singleselect import Select
from quizzard.terminal import CursesTerminal
from quizzard.text import Input


class KeyDecodeTests(unittest.TestCase):
    def test_decode(self) -> None:
        self.assertEqual(decode("\n"), ENTER)
        self.assertEqual(decode(curses.KEY_ENTER), ENTER)
        self.assertEqual(decode(127), BACKSPACE)
        self.assertEqual(decode("\x7f"), BACKSPACE)
        self.assertEqual(decode(curses.KEY_UP), UP)
        self.assertEqual(decode(curses.KEY_DOWN), DOWN)
        self.assertEqual(decode("é"), Key.of("é"))
        self.assertEqual(decode(curses.KEY_F1), OTHER)


class CursesTerminalTests(unittest.TestCase):
    def _terminal(self) -> tuple[CursesTerminal, mock.Mock]:
        window = mock.Mock()
        window.getmaxyx.return_value = (24, 80)
        return CursesTerminal(window), window

    def test_window_setup(self) -> None:
        _, window = self._terminal()
        window.scrollok.assert_called_once_with(True)
        window.keypad.assert_called_once_with(True)

    def test_read_key_decodes(self) -> None:
        term, window = self._terminal()
        window.get_wch.return_value = curses.KEY_LEFT
        self.assertEqual(term.read_key(), Key("left"))

    def test_curses_error_becomes_device_error(self) -> None:
        term, window = self._terminal()
        window.get_wch.side_effect = curses.error("no input")
        with self.assertRaises(DeviceIOError) as ctx:
            term.read_key()
        self.assertIsInstance(ctx.exception, OSError)
        self.assertIsInstance(ctx.exception.__cause__, curses.error)

    def test_clear_last_lines_moves_to_top_of_cleared_block(self) -> None:
        term, window = self._terminal()
        window.getyx.return_value = (5, 3)
        term.clear_last_lines(2)
        self.assertEqual(window.move.call_args_list, [mock.call(3, 0), mock.call(4, 0), mock.call(3, 0)])
        self.assertEqual(window.clrtoeol.call_count, 2)

    def test_move_cursor_follows_wrapped_rows(self) -> None:
        term, window = self._terminal()
        window.getyx.return_value = (2, 2)
        term.move_cursor(-5)
        window.move.assert_called_with(1, 77)
        term.move_cursor(80)
        window.move.assert_called_with(3, 2)

    def test_move_cursor_clamps_to_window(self) -> None:
        term, window = self._terminal()
        window.getyx.return_value = (0, 1)
        term.move_cursor(-5)
        window.move.assert_called_with(0, 0)
        window.getyx.return_value = (23, 78)
        term.move_cursor(5)
        window.move.assert_called_with(23, 79)

    def test_write_line_appends_newline(self) -> None:
        term, window = self._terminal()
        term.write_line("hello", 7)
        self.assertEqual(window.addstr.call_args_list, [mock.call("hello", 7), mock.call("\n")])

    def test_size(self) -> None:
        term, _ = self._terminal()
        self.assertEqual(term.size(), (24, 80))


class ScriptedTerminalTests(unittest.TestCase):
    def test_clear_chars_blanks_before_cursor(self) -> None:
        term = ScriptedTerminal()
        term.write_raw("abcd")
        term.clear_chars(2)
        self.assertEqual(term.cursor, (0, 2))
        self.assertEqual(term.screen(), ["ab"])

    def test_reads_past_script_fail(self) -> None:
        term = ScriptedTerminal(["a"])
        self.assertEqual(term.read_key(), Key.of("a"))
        with self.assertRaises(DeviceIOError):
            term.read_key()


class LogStoreTests(unittest.TestCase):
    def test_logstore_falls_back_when_preferred_dir_unwritable(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            home = Path(td)
            real_mkdir = Path.mkdir

            def fake_mkdir(path_obj: Path, *args: object, **kwargs: object) -> None:
                if str(path_obj) == "/var/log/quizzard":
                    raise PermissionError("denied")
                return real_mkdir(path_obj, *args, **kwargs)

            with mock.patch("quizzard.logstore.Path.home", return_value=home), mock.patch(
                "quizzard.logstore.Path.mkdir",
                new=fake_mkdir,
            ):
                store = LogStore(max_entries=32, log_dir=Path("/var/log/quizzard"))
                self.assertEqual(store.log_dir, home / ".cache" / "quizzard" / "logs")
                self.assertIn("/var/log/quizzard is not writable", store.fallback_reason)
                store.record("asked", "Name?")
                assert store.log_path is not None
                self.assertTrue(store.log_path.exists())

    def test_memory_only_without_log_dir(self) -> None:
        store = LogStore()
        store.record("answered", "Name?", "abc")
        self.assertIsNone(store.log_path)
        self.assertEqual([(e.kind, e.level) for e in store.entries], [("answered", "info")])

    def test_text_prompt_events_reach_the_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            store = LogStore(max_entries=32, log_dir=Path(td))
            prompt = Input("Name?", validator=_at_least_two, log=store)
            prompt.ask(ScriptedTerminal(["a", ENTER, "b", ENTER]))
            self.assertEqual(
                [(e.kind, e.detail) for e in store.entries],
                [("asked", ""), ("rejected", "Too short"), ("answered", "ab")],
            )
            assert store.log_path is not None
            lines = store.log_path.read_text(encoding="utf-8").splitlines()
            self.assertEqual(len(lines), 3)
            self.assertTrue(lines[1].endswith("warn  rejected 'Name?': Too short"))
            self.assertTrue(lines[2].endswith("info  answered 'Name?': ab"))

    def test_skips_are_recorded_as_skipped(self) -> None:
        store = LogStore()
        options = OptionList.of(["tea", "coffee"])
        Select("Drink?", options, log=store).ask_opt(ScriptedTerminal([ENTER]))
        MultiSelect("Snacks?", options, log=store).ask(ScriptedTerminal([ENTER]))
        settled = [(e.kind, e.prompt, e.detail) for e in store.entries if e.kind != "asked"]
        self.assertEqual(settled, [("skipped", "Drink?", "Skipped"), ("skipped", "Snacks?", "Skipped")])

    def test_bounded_history(self) -> None:
        store = LogStore(max_entries=2)
        for n in range(3):
            store.record("answered", f"Q{n}", str(n), ts=float(n))
        self.assertEqual([e.prompt for e in store.entries], ["Q1", "Q2"])


def _at_least_two(raw: str) -> str:
    if len(raw) < 2:
        raise ValidationError("Too short")
    return raw


if __name__ == "__main__":
    unittest.main()
