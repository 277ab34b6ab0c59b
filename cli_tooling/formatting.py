import math

NANOSECOND = 1.0
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

binary_byte_units = [
    ("PiB", 1024.0 ** 5),
    ("TiB", 1024.0 ** 4),
    ("GiB", 1024.0 ** 3),
    ("MiB", 1024.0 ** 2),
    ("KiB", 1024.0),
    ("B", 1.0),
]

decimal_byte_units = [
    ("PB", 1000.0 ** 5),
    ("TB", 1000.0 ** 4),
    ("GB", 1000.0 ** 3),
    ("MB", 1000.0 ** 2),
    ("KB", 1000.0),
    ("B", 1.0),
]

# Lowercase unit name -> (canonical name, multiplier, is binary)
byte_units = {name.lower(): (name, mult, True) for name, mult in binary_byte_units}
byte_units.update({name.lower(): (name, mult, False) for name, mult in decimal_byte_units[:-1]})


def _trim_decimals(x, decimals):
    return f"{x:.{decimals}f}".rstrip("0").rstrip(".")


class Formatter(object):

    def __init__(self, decimals=3, unit=""):
        self.set_decimals(decimals)
        self.set_unit(unit)

    def set_decimals(self, decimals):
        self.decimals = decimals

    def set_unit(self, unit):
        self.unit = unit or ""

    def __call__(self, x):
        """Convert a number to string, integral values without decimals, with the unit appended"""
        if isinstance(x, int) or (math.isfinite(x) and x == int(x)):
            value = f"{int(x):d}"
        else:
            value = f"{x:.{self.decimals}f}"
        return value + self.unit

    def duration(self, ns):
        """Format nanoseconds the way Go prints a time.Duration, e.g. 1h2m3.5s or 1.5ms"""
        ns = int(ns)
        if ns == 0:
            return "0s"
        sign = "-" if ns < 0 else ""
        ns = abs(ns)
        if ns < SECOND:
            if ns < MICROSECOND:
                return f"{sign}{ns}ns"
            if ns < MILLISECOND:
                return f"{sign}{_trim_decimals(ns / MICROSECOND, 3)}µs"
            return f"{sign}{_trim_decimals(ns / MILLISECOND, 6)}ms"
        hours, rest = divmod(ns, int(HOUR))
        minutes, rest = divmod(rest, int(MINUTE))
        seconds = _trim_decimals(rest / SECOND, 9)
        out = sign
        if hours:
            out += f"{hours}h"
        if hours or minutes:
            out += f"{minutes}m"
        return out + f"{seconds}s"

    def bytes(self, value, binary=True):
        """
        Format a byte count.

        If the unit is a byte unit, the value is converted to it. If the unit is any
        other non-empty string, it is appended to the raw count. Otherwise the value is
        humanized with the biggest unit that fits, in binary or decimal base.
        """
        if self.unit.lower() in byte_units:
            name, mult, _ = byte_units[self.unit.lower()]
            return f"{value / mult:.2f} {name}"
        if self.unit:
            return f"{value:.0f} {self.unit}"
        for name, mult in (binary_byte_units if binary else decimal_byte_units):
            if value >= mult:
                return f"{value / mult:.2f} {name}"
        return f"{value:.0f} B"

fmt = Formatter(decimals=3)
