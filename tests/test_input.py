"""Tests for one-byte key reads and arrow-sequence assembly."""

from __future__ import annotations

import os
import unittest

from navi.input import KeyReader, read_key


def scripted_reader(data: str) -> KeyReader:
    chars = iter(data)
    return KeyReader(lambda: next(chars, ""))


class ReadKeyTests(unittest.TestCase):
    def test_reads_exactly_one_byte_per_call(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b[A")
            keys = [read_key(read_fd) for _ in range(3)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(keys, ["\x1b", "[", "A"])

    def test_end_of_input_returns_empty_string(self) -> None:
        read_fd, write_fd = os.pipe()
        os.close(write_fd)
        try:
            self.assertEqual(read_key(read_fd), "")
        finally:
            os.close(read_fd)


class KeyReaderTests(unittest.TestCase):
    def test_arrow_sequences_become_tokens(self) -> None:
        reader = scripted_reader("\x1b[A\x1b[B")

        self.assertEqual([reader.next_key() for _ in range(2)], ["UP", "DOWN"])

    def test_unbound_arrows_collapse_to_escape(self) -> None:
        reader = scripted_reader("\x1b[C\x1b[Dq")

        self.assertEqual([reader.next_key() for _ in range(3)], ["ESC", "ESC", "q"])

    def test_enter_backspace_and_printables(self) -> None:
        reader = scripted_reader("\n\r\x7f\x08q")

        self.assertEqual(
            [reader.next_key() for _ in range(5)],
            ["ENTER", "ENTER", "BACKSPACE", "BACKSPACE", "q"],
        )

    def test_modal_escape_does_not_consume_following_key(self) -> None:
        reader = scripted_reader("\x1bA")

        self.assertEqual(reader.next_key(modal=True), "ESC")
        self.assertEqual(reader.next_key(modal=True), "A")

    def test_browse_escape_consumes_sequence_bytes(self) -> None:
        reader = scripted_reader("\x1bxq")

        self.assertEqual(reader.next_key(), "ESC")
        self.assertEqual(reader.next_key(), "q")

    def test_unknown_csi_final_byte_is_escape(self) -> None:
        reader = scripted_reader("\x1b[Z")

        self.assertEqual(reader.next_key(), "ESC")

    def test_end_of_input_mid_sequence(self) -> None:
        self.assertEqual(scripted_reader("").next_key(), "")
        self.assertEqual(scripted_reader("\x1b").next_key(), "")
        self.assertEqual(scripted_reader("\x1b[").next_key(), "")


if __name__ == "__main__":
    unittest.main()
