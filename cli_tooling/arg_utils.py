def parse_skip_count(count):
  """
  Parse the count argument of skip.

  'N' skips the first N lines, '-N' the last N lines and 'N:-M' both the first N and
  the last M lines.

  Returns:
    A tuple (start_at, end_skip_count) of non-negative integers
  """
  try:
    left, sep, right = count.partition(':')
    start_at = int(left)
    if sep:
      end_skip_count = int(right)
      if start_at < 0 or end_skip_count >= 0:
        raise ValueError(count)
      return start_at, -end_skip_count
  except ValueError:
    # more informative error message
    raise ValueError(
      f"Failed to parse skip count: {count}. The expected format is:"
      " \"N\", \"-N\" or \"N:-M\" with N >= 0 and M > 0"
    )
  if start_at < 0:
    return 0, -start_at
  return start_at, 0
