import re
import numpy as np

from cli_tooling import formatting
from cli_tooling.formatting import fmt

KIND_NUMBER = 'number'
KIND_DURATION = 'duration'
KIND_BYTES = 'bytes'

duration_regexp = re.compile(r'\s*(ns|us|µs|ms|s|m|h)\s*$')
duration_part_regexp = re.compile(r'([0-9]*\.?[0-9]+)(ns|us|µs|ms|s|m|h)')
bytes_regexp = re.compile(r'(?i)\s*([KMGTP]i?B|B)\s*$')
spaces_regexp = re.compile(r'\s+')

duration_units = {
  'ns': formatting.NANOSECOND,
  'us': formatting.MICROSECOND,
  'µs': formatting.MICROSECOND,
  'ms': formatting.MILLISECOND,
  's': formatting.SECOND,
  'm': formatting.MINUTE,
  'h': formatting.HOUR,
}

def parse_duration(text):
  """
  Parse a duration like '1h30m', '1.5s' or '250 ms' into nanoseconds.
  """
  compact = spaces_regexp.sub('', text)
  sign = 1.0
  if compact[:1] in ('-', '+'):
    sign = -1.0 if compact[0] == '-' else 1.0
    compact = compact[1:]
  pos, total = 0, 0.0
  for match in duration_part_regexp.finditer(compact):
    if match.start() != pos:
      break
    total += float(match.group(1)) * duration_units[match.group(2)]
    pos = match.end()
  if pos == 0 or pos != len(compact):
    raise ValueError(f"Couldn't parse duration like argument {text!r}")
  return sign * total

def parse_bytes(text):
  """
  Parse a byte size like '10 KiB' or '3.5GB'.

  Returns:
    A tuple of the number of bytes and whether the unit is a binary (1024 based) one
  """
  text = text.strip()
  match = bytes_regexp.search(text)
  if not match:
    raise ValueError(f'Invalid byte format: {text!r}')
  unit = match.group(1).strip().lower()
  number = text[:match.start()].strip()
  try:
    value = float(number)
  except ValueError:
    raise ValueError(f'Invalid number in byte value {text!r}')
  if unit not in formatting.byte_units:
    raise ValueError(f'Unknown byte unit: {match.group(1)!r}')
  _, mult, is_binary = formatting.byte_units[unit]
  return value * mult, is_binary

def parse_value(element, previous_kind=None):
  """
  Parse a single element of the statistics input.

  Args:
    element: A number, a duration or a byte size
    previous_kind: The kind of the values parsed so far, plain numbers are read as
                   raw byte counts after byte sizes

  Returns:
    A tuple of the value, its kind and, for byte sizes, whether the unit is binary
  """
  if bytes_regexp.search(element):
    value, is_binary = parse_bytes(element)
    return value, KIND_BYTES, is_binary
  if duration_regexp.search(element):
    return parse_duration(element), KIND_DURATION, None
  try:
    value = float(element)
  except ValueError:
    raise ValueError(f"all arguments should be a number, {element!r} wasn't")
  if previous_kind == KIND_BYTES:
    return value, KIND_BYTES, None
  return value, KIND_NUMBER, None

class ValueCollector(object):
  """Accumulates values of a single kind"""

  def __init__(self):
    self.kind = None
    self.binary = None
    self.values = []

  def add(self, element):
    value, kind, is_binary = parse_value(element, self.kind)
    if self.kind is None:
      self.kind = kind
    elif self.kind != kind:
      raise ValueError(f'All arguments should be of the same kind, {self.kind} and {kind} are not')
    if self.binary is None and is_binary is not None:
      self.binary = is_binary
    self.values.append(value)

  def __len__(self):
    return len(self.values)

def compute_stats(values):
  """
  Compute summary statistics.

  Args:
    values: A list of floats, at least one

  Returns:
    A dictionary with count, min, max, sum, mean, median, p90, p95, p99 and std
  """
  dist = np.sort(np.asarray(values, dtype=float))
  mean = float(dist.mean())
  stats = {
    'count': len(dist),
    'min': float(dist[0]),
    'max': float(dist[-1]),
    'sum': float(dist.sum()),
    'mean': mean,
  }
  for name, p in (('median', 50), ('p90', 90), ('p95', 95), ('p99', 99)):
    stats[name] = float(np.percentile(dist, p))
  stats['std'] = float(dist.std(ddof=1)) if len(dist) > 1 else 0.0
  return stats

def generate_stats_report(collector):
  """
  Generate the lines of the statistics report of the collected values.
  """
  if len(collector) == 0:
    return ['Statistics unavailable, no data']

  stats = compute_stats(collector.values)
  if collector.kind == KIND_DURATION:
    fmt_value = fmt.duration
  elif collector.kind == KIND_BYTES:
    binary = True if collector.binary is None else collector.binary
    fmt_value = lambda x: fmt.bytes(x, binary=binary)
  else:
    fmt_value = fmt

  if collector.kind == KIND_DURATION:
    count = f"{stats['count']}"
  else:
    count = f"{stats['count']}{fmt.unit}"
  return [
    f"Count: {count}",
    f"Range: Min {fmt_value(stats['min'])} - Max {fmt_value(stats['max'])}",
    f"Sum: {fmt_value(stats['sum'])}",
    f"Average: {fmt_value(stats['mean'])}",
    f"Median: {fmt_value(stats['median'])} (p90={fmt_value(stats['p90'])} p95={fmt_value(stats['p95'])} p99={fmt_value(stats['p99'])})",
    f"Standard Deviation: {fmt_value(stats['std'])}",
  ]
