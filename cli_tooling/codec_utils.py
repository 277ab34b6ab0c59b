import base64
import binascii
import re

DEC_REGEXP = re.compile(r'^[0-9]+$')
HEX_REGEXP = re.compile(r'^(0[xX])?[a-fA-F0-9]+$')
EVEN_HEX_REGEXP = re.compile(r'^(0[xX])?([a-fA-F0-9]{2})+$')

representations = ('integer', 'string', 'base64', 'base64url')

def encode_hex(data):
  return data.hex()

def decode_hex(text):
  out = text.lower()
  if out.startswith('0x'):
    out = out[2:]
  if len(out) % 2 != 0:
    out = '0' + out
  try:
    return bytes.fromhex(out)
  except ValueError:
    raise ValueError(f'value {text!r} is not a valid hexadecimal value')

def integer_to_bytes(text):
  if not DEC_REGEXP.fullmatch(text):
    raise ValueError(f'number {text!r} is invalid')
  value = int(text, 10)
  return value.to_bytes(max(1, (value.bit_length() + 7) // 8), 'big')

def integer_to_hex(text):
  return encode_hex(integer_to_bytes(text))

def _decode_base64(text, urlsafe=False):
  try:
    if urlsafe:
      return base64.b64decode(text, altchars=b"-_", validate=True)
    return base64.b64decode(text, validate=True)
  except binascii.Error:
    raise ValueError(f'value {text!r} is not a valid base64 value')

def to_hex(element, representation=None):
  """
  Convert a single element to its hexadecimal representation.

  Args:
    element: The value to convert
    representation: How to read element, one of 'integer', 'string', 'base64' or
                    'base64url'. If None, the representation is inferred: digits are
                    an integer and a double quoted value is a string.

  Returns:
    The lowercase hexadecimal string
  """
  if element == '':
    return ''
  if representation == 'integer':
    return integer_to_hex(element)
  elif representation == 'string':
    return encode_hex(element.encode('utf-8'))
  elif representation == 'base64':
    return encode_hex(_decode_base64(element))
  elif representation == 'base64url':
    return encode_hex(_decode_base64(element, urlsafe=True))
  elif representation is not None:
    raise ValueError(f'Unknown representation {representation}, expected one of {", ".join(representations)}')

  if DEC_REGEXP.match(element):
    return integer_to_hex(element)
  if len(element) >= 2 and element[0] == '"' and element[-1] == '"':
    return encode_hex(element[1:-1].encode('utf-8'))
  raise ValueError(
    f"Unable to infer the representation of {element!r}, specify one of"
    " integer, string, base64 or base64url"
  )

def to_dec(element):
  """Convert a hexadecimal element to base 10, other elements are left untouched"""
  if not HEX_REGEXP.match(element):
    return element
  return str(int.from_bytes(decode_hex(element), 'big'))

def to_base64(element):
  if EVEN_HEX_REGEXP.match(element):
    data = decode_hex(element)
  else:
    data = element.encode('utf-8')
  return base64.b64encode(data).decode('ascii')

def bytes_to_ascii(data):
  chars = []
  for byte in data:
    char = chr(byte)
    chars.append(char if char.isprintable() or char.isspace() else '.')
  return ''.join(chars)

def to_ascii(element, representation=None):
  if element == '':
    return ''
  if representation == 'base64':
    return bytes_to_ascii(_decode_base64(element))
  elif representation is not None:
    raise ValueError(f'Unknown representation {representation}, expected base64')
  if HEX_REGEXP.match(element):
    return bytes_to_ascii(decode_hex(element))
  return element

def to_lower(element):
  return element.lower()

def to_upper(element):
  return element.upper()
