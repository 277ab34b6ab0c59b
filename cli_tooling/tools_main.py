# Overall imports
import argparse
import os
import sys
import logging as log

# In-package imports
from cli_tooling import __version__
from cli_tooling import reader_utils
from cli_tooling import codec_utils
from cli_tooling import stat_utils
from cli_tooling import arg_utils
from cli_tooling import line_utils
from cli_tooling import formatting

log.basicConfig(level=log.INFO)

stdin_epilog = 'When standard input is piped, values are read from it and the command line values are ignored.'

def create_parser(prog, description):
  parser = argparse.ArgumentParser(prog=prog, description=description, epilog=stdin_epilog)
  parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
  return parser

def add_elements_argument(parser):
  parser.add_argument('elements', type=str, nargs='*',
                      help='Values to process, ignored when standard input is piped')

def run_tool(func):
  """
  Run the body of a tool, exiting with status 1 when it fails on its input.
  """
  try:
    func()
  except BrokenPipeError:
    # The reader went away (e.g. `| head`), silence the flush Python does at exit
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())
    sys.exit(1)
  except (ValueError, OSError, reader_utils.NoStdinError) as e:
    log.error(e)
    sys.exit(1)

def convert_elements(elements, convert):
  reader_utils.argument_reader(lambda element: print(convert(element)), elements)

def _element_tool(prog, description, convert, argv):
  parser = create_parser(prog, description)
  add_elements_argument(parser)
  args = parser.parse_args(argv)
  run_tool(lambda: convert_elements(args.elements, convert))

def to_lower_main(argv=None):
  _element_tool('to-lower', 'Print each value in lower case', codec_utils.to_lower, argv)

def to_upper_main(argv=None):
  _element_tool('to-upper', 'Print each value in upper case', codec_utils.to_upper, argv)

def to_dec_main(argv=None):
  _element_tool('to-dec', 'Print each hexadecimal value in base 10, other values are printed as is',
                codec_utils.to_dec, argv)

def to_base64_main(argv=None):
  _element_tool('to-base64', 'Print the standard base64 encoding of each value, hexadecimal values are decoded first',
                codec_utils.to_base64, argv)

def to_hex_main(argv=None):
  parser = create_parser('to-hex', 'Print the hexadecimal representation of each value')
  add_elements_argument(parser)
  group = parser.add_mutually_exclusive_group()
  group.add_argument('-i', dest='representation', action='store_const', const='integer',
                     help='Decode the input as an integer representation')
  group.add_argument('-s', dest='representation', action='store_const', const='string',
                     help="Encode the string itself and not its representation")
  group.add_argument('--b64', dest='representation', action='store_const', const='base64',
                     help='Decode the input as a standard base64 representation')
  group.add_argument('--b64u', dest='representation', action='store_const', const='base64url',
                     help='Decode the input as URL base64 representation')
  group.add_argument('--in', dest='from_stdin', action='store_true',
                     help='Encode the piped standard input as a raw bytes stream')
  args = parser.parse_args(argv)

  def run():
    if args.from_stdin:
      reader_utils.process_stdin_bytes(16, lambda chunk: sys.stdout.write(codec_utils.encode_hex(chunk)))
      print()
    else:
      convert_elements(args.elements, lambda element: codec_utils.to_hex(element, args.representation))
  run_tool(run)

def to_ascii_main(argv=None):
  parser = create_parser('to-ascii', 'Print the printable characters of each hexadecimal (or base64) value')
  add_elements_argument(parser)
  parser.add_argument('--b64', dest='representation', action='store_const', const='base64',
                      help='Decode the input as a standard base64 representation')
  args = parser.parse_args(argv)
  run_tool(lambda: convert_elements(args.elements, lambda element: codec_utils.to_ascii(element, args.representation)))

def stats_main(argv=None):
  parser = create_parser('stats', 'Print statistics about numbers, durations (10ms, 1h2m) or byte sizes (3 KiB, 2GB)')
  add_elements_argument(parser)
  parser.add_argument('-u', '--unit', type=str, default='',
                      help='An optional unit, appended verbatim to each value of the report, or a byte unit to convert byte sizes to')
  parser.add_argument('--decimals', type=int, default=3,
                      help='Number of decimals to print for floating point numbers')
  args = parser.parse_args(argv)

  # Set formatting
  formatting.fmt.set_decimals(args.decimals)
  formatting.fmt.set_unit(args.unit)

  def run():
    collector = stat_utils.ValueCollector()
    for element in reader_utils.iterate_line_arguments(args.elements):
      if element.strip():
        collector.add(element)
    for line in stat_utils.generate_stats_report(collector):
      print(line)
  run_tool(run)

def skip_main(argv=None):
  parser = argparse.ArgumentParser(
    prog='skip',
    description='Skips line(s) at the beginning or the end of a line input stream',
    epilog="""
    Examples: 'skip 1' skips the first line of standard input, 'skip -2' its last two lines
    and 'skip 1:-2 lines.txt' the first line and the last two lines of lines.txt.
    """
  )
  parser.add_argument('count', type=str,
                      help="'N' skips N lines at the beginning, '-N' at the end, 'N:-M' both")
  parser.add_argument('file', type=str, nargs='?', default=None,
                      help='A path to the file to read, standard input when not specified')
  parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
  args = parser.parse_args(argv)

  def run():
    start_at, end_skip_count = arg_utils.parse_skip_count(args.count)
    if args.file is None:
      lines = reader_utils.iterate_lines(reader_utils.require_piped_stdin())
    else:
      lines = reader_utils.iterate_file_lines(args.file)
    line_utils.skip_lines(lines, start_at, end_skip_count, print)
  run_tool(run)
