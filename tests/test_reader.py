import io
import os.path
import sys
import tempfile
import unittest
from unittest import mock

cli_tooling_root = os.path.join(os.path.dirname(os.path.realpath(__file__)), "..")
sys.path.append(cli_tooling_root)

from cli_tooling import reader_utils


class TerminalStream(io.StringIO):

  def isatty(self):
    return True


def _collect(**kwargs):
  tokens = []
  reader_utils.argument_reader(tokens.append, **kwargs)
  return tokens


class TestArgumentReaderInteractive(unittest.TestCase):

  def test_explicit_arguments(self):
    self.assertEqual(_collect(arguments=["foo", "bar"], interactive=True), ["foo", "bar"])

  def test_explicit_arguments_untransformed(self):
    arguments = ["  spaced  ", "", "a b", "--flag"]
    self.assertEqual(_collect(arguments=arguments, interactive=True), arguments)

  def test_default_to_invocation_arguments(self):
    self.assertEqual(_collect(interactive=True, argv=["--x", "1"]), ["--x", "1"])

  def test_default_to_sys_argv(self):
    with mock.patch.object(sys, "argv", ["prog", "--x", "1"]):
      self.assertEqual(_collect(interactive=True), ["--x", "1"])

  def test_arguments_added_by_handler_are_not_read(self):
    arguments = ["foo", "bar"]
    seen = []
    def handler(token):
      seen.append(token)
      arguments.append(token + "!")
    reader_utils.argument_reader(handler, arguments, interactive=True)
    self.assertEqual(seen, ["foo", "bar"])

  def test_empty_explicit_arguments_are_not_defaulted(self):
    self.assertEqual(_collect(arguments=[], interactive=True, argv=["other"]), [])

  def test_terminal_stream_is_detected(self):
    stdin = TerminalStream("ignored\n")
    self.assertEqual(_collect(arguments=["foo"], stdin=stdin), ["foo"])
    self.assertEqual(stdin.read(), "ignored\n")

  def test_missing_stdin_is_interactive(self):
    with mock.patch.object(sys, "stdin", None):
      self.assertTrue(reader_utils.stdin_is_interactive())
      self.assertEqual(_collect(arguments=["foo"]), ["foo"])


class TestArgumentReaderPiped(unittest.TestCase):

  def test_lines_split_on_whitespace(self):
    stdin = io.StringIO("a b\n  c  \n")
    self.assertEqual(_collect(stdin=stdin), ["a", "b", "c"])

  def test_explicit_arguments_ignored(self):
    stdin = io.StringIO("a\n")
    self.assertEqual(_collect(arguments=["foo", "bar"], stdin=stdin), ["a"])

  def test_empty_stream(self):
    self.assertEqual(_collect(stdin=io.StringIO("")), [])

  def test_blank_stream(self):
    self.assertEqual(_collect(stdin=io.StringIO("   \n\t\n\n")), [])

  def test_tokens_match_whole_stream_split(self):
    text = "one two\tthree\n\n  four\r\nfive   six seven\nlast"
    self.assertEqual(_collect(stdin=io.StringIO(text)), text.split())

  def test_stream_is_drained(self):
    stdin = io.StringIO("a b\nc\n")
    _collect(stdin=stdin)
    self.assertEqual(stdin.read(), "")

  def test_interactive_override(self):
    stdin = TerminalStream("a b\n")
    self.assertEqual(_collect(arguments=["foo"], stdin=stdin, interactive=False), ["a", "b"])

  def test_handler_called_in_order(self):
    calls = []
    reader_utils.argument_reader(lambda token: calls.append((len(calls), token)), stdin=io.StringIO("x y\nz\n"))
    self.assertEqual(calls, [(0, "x"), (1, "y"), (2, "z")])

  def test_read_errors_propagate(self):
    class BrokenStream(io.StringIO):
      def __iter__(self):
        raise OSError("read failure")
    with self.assertRaises(OSError):
      _collect(stdin=BrokenStream("a\n"))


class TestIterateArguments(unittest.TestCase):

  def test_generator_matches_reader(self):
    self.assertEqual(list(reader_utils.iterate_arguments(stdin=io.StringIO("a b\nc"))), ["a", "b", "c"])
    self.assertEqual(list(reader_utils.iterate_arguments(["foo"], interactive=True)), ["foo"])

  def test_line_arguments_keep_lines(self):
    stdin = io.StringIO("10 ms\n\n2s\r\n")
    self.assertEqual(list(reader_utils.iterate_line_arguments(stdin=stdin)), ["10 ms", "", "2s"])

  def test_line_arguments_interactive(self):
    self.assertEqual(list(reader_utils.iterate_line_arguments(["1", "2"], interactive=True)), ["1", "2"])

  def test_file_lines(self):
    with tempfile.TemporaryDirectory() as tmp_dir:
      path = os.path.join(tmp_dir, "lines.txt")
      with open(path, "w", encoding="utf-8") as f:
        f.write("first\nsecond line\n\nlast")
      self.assertEqual(list(reader_utils.iterate_file_lines(path)), ["first", "second line", "", "last"])


class TestPipedStdin(unittest.TestCase):

  def test_require_piped_stdin(self):
    stdin = io.StringIO("data")
    self.assertIs(reader_utils.require_piped_stdin(stdin), stdin)
    with self.assertRaises(reader_utils.NoStdinError):
      reader_utils.require_piped_stdin(TerminalStream(""))

  def test_process_stdin_bytes(self):
    stdin = io.TextIOWrapper(io.BytesIO(bytes(range(40))))
    chunks = []
    reader_utils.process_stdin_bytes(16, chunks.append, stdin=stdin)
    self.assertEqual([len(c) for c in chunks], [16, 16, 8])
    self.assertEqual(b"".join(chunks), bytes(range(40)))

  def test_process_stdin_bytes_empty(self):
    chunks = []
    reader_utils.process_stdin_bytes(16, chunks.append, stdin=io.BytesIO(b""), interactive=False)
    self.assertEqual(chunks, [])

  def test_process_stdin_bytes_invalid_size(self):
    with self.assertRaises(ValueError):
      reader_utils.process_stdin_bytes(0, print, stdin=io.BytesIO(b"a"), interactive=False)


if __name__ == '__main__':
  unittest.main()
