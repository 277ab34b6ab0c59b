import sys
import logging as log


class NoStdinError(RuntimeError):
  pass


def stdin_is_interactive(stdin=None):
  """
  Tell whether the given input stream is attached to a terminal.

  Args:
    stdin: The stream to inspect, sys.stdin if not specified

  Returns:
    True for a terminal, or when there is no stream at all, False for a file or a pipe
  """
  stdin = sys.stdin if stdin is None else stdin
  if stdin is None:
    return True
  return stdin.isatty()

def _resolve_stream(stdin, interactive):
  stdin = sys.stdin if stdin is None else stdin
  if interactive is None:
    interactive = stdin_is_interactive(stdin)
  return stdin, interactive

def iterate_argv_arguments(arguments=None, argv=None):
  if arguments is None:
    arguments = sys.argv[1:] if argv is None else argv
  for argument in tuple(arguments):
    yield argument

def iterate_stdin_arguments(stdin=None):
  stdin = sys.stdin if stdin is None else stdin
  for line in stdin:
    for element in line.split():
      yield element

def iterate_arguments(arguments=None, interactive=None, stdin=None, argv=None):
  """
  Iterate over the tokens of the command line input.

  When standard input is a terminal, the tokens are the explicit arguments, or the
  process arguments when none are given. Otherwise the explicit arguments are ignored
  and the tokens are the whitespace separated elements of each line of standard input.

  Args:
    arguments: An explicit list of tokens, used only when stdin is a terminal
    interactive: Overrides the terminal check on stdin when not None
    stdin: The input stream, sys.stdin if not specified
    argv: The process arguments, sys.argv[1:] if not specified
  """
  stdin, interactive = _resolve_stream(stdin, interactive)
  if interactive:
    log.debug('Reading arguments from the command line')
    return iterate_argv_arguments(arguments, argv=argv)
  log.debug('Reading arguments from standard input')
  return iterate_stdin_arguments(stdin)

def argument_reader(handler, arguments=None, interactive=None, stdin=None, argv=None):
  """
  Call handler once per token of the command line input, in order.

  See iterate_arguments for the way tokens are discovered.
  """
  for argument in iterate_arguments(arguments, interactive=interactive, stdin=stdin, argv=argv):
    handler(argument)

def iterate_lines(stream):
  for line in stream:
    yield line.rstrip('\r\n')

def iterate_line_arguments(arguments=None, interactive=None, stdin=None, argv=None):
  """
  Same as iterate_arguments, but a piped stdin yields whole lines instead of
  whitespace separated elements.
  """
  stdin, interactive = _resolve_stream(stdin, interactive)
  if interactive:
    return iterate_argv_arguments(arguments, argv=argv)
  return iterate_lines(stdin)

def iterate_file_lines(filename):
  with open(filename, "r", encoding="utf-8") as f:
    yield from iterate_lines(f)

def require_piped_stdin(stdin=None, interactive=None):
  stdin, interactive = _resolve_stream(stdin, interactive)
  if interactive:
    raise NoStdinError('standard input is a terminal, pipe some data into it')
  return stdin

def process_stdin_bytes(buffer_size, processor, stdin=None, interactive=None):
  """
  Read the raw bytes of a piped standard input.

  Args:
    buffer_size: The maximum number of bytes passed to processor at once
    processor: Called with each chunk of bytes read, never with an empty one
    stdin: The input stream, sys.stdin if not specified
    interactive: Overrides the terminal check on stdin when not None
  """
  if buffer_size <= 0:
    raise ValueError(f'buffer_size must be positive, got {buffer_size}')
  stdin = require_piped_stdin(stdin, interactive)
  reader = getattr(stdin, 'buffer', stdin)
  while True:
    chunk = reader.read(buffer_size)
    if not chunk:
      break
    processor(chunk)
