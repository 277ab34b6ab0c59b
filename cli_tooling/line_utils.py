from collections import deque

class LineBuffer(object):
  """
  Hold back the last max_lines pushed lines.

  A line is passed to processor only once max_lines newer lines were pushed after it,
  so the last max_lines lines of the input are never processed. With max_lines set to
  0, every line goes straight to processor.
  """

  def __init__(self, max_lines, processor):
    if max_lines < 0:
      raise ValueError(f'max_lines must not be negative, got {max_lines}')
    self.max_lines = max_lines
    self.processor = processor
    self.lines = deque()

  def push(self, line):
    if self.max_lines == 0:
      self.processor(line)
      return
    self.lines.append(line)
    if len(self.lines) > self.max_lines:
      self.processor(self.lines.popleft())

def skip_lines(lines, start_at, end_skip_count, processor):
  buffer = LineBuffer(end_skip_count, processor)
  for i, line in enumerate(lines):
    if i >= start_at:
      buffer.push(line)
