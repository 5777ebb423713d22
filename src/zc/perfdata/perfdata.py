r"""Parser for nagios performance data

    >>> for p in parse_perfdata("users=2;3;7;0 'disk usage'=97.3%;90;95"):
    ...     print(repr(p))
    Perfdata(label='users', value=2.0, unit='',
             warning=3.0, critical=7.0, min=0.0, max=nan)
    Perfdata(label="'disk usage'", value=97.3, unit='%',
             warning=90.0, critical=95.0, min=nan, max=nan)

Absent thresholds are NaN:

    >>> [p] = parse_perfdata('users=2;;;;')
    >>> p.warning != p.warning, math.isnan(p.max)
    (True, True)

Records render back to performance data:

    >>> print(p)
    users=2
    >>> print(' '.join(str(p) for p in parse_perfdata(
    ...     "'ha ha'=3has;;5 rta=0,80ms;1;2;0;10")))
    'ha ha'=3has;;5 rta=0.8ms;1;2;0;10

The first bad entry fails the whole parse:

    >>> parse_perfdata('a=1 b=2;x c=3')
    Traceback (most recent call last):
    ...
    zc.perfdata.perfdata.NumberFormat: could not parse perfdata:
       invalid number 'x'

See: https://nagios-plugins.org/doc/guidelines.html#AEN200
"""
import collections
import decimal
import logging
import math
import re

logger = logging.getLogger(__name__)

nan = math.nan

split = re.compile(
    r"(?:'[^']+')?"   # quoted label
    r"\S+"            # rest of the entry
    ).findall

match_label = re.compile(r"(?:'[^']+')?[^=']*").match
match_number = re.compile(r"[0-9.,]+").match

class PerfdataError(ValueError):
    """Performance data couldn't be parsed

    The text attribute has the input that couldn't be parsed.
    """

    def __init__(self, message, text=None):
        ValueError.__init__(self, message)
        self.text = text

class SplitFailure(PerfdataError):
    "No entries found"

class MalformedEntry(PerfdataError):
    "An entry has too many (or no) fields"

class InvalidLabel(PerfdataError):
    "An entry has an empty label"

class NoValue(PerfdataError):
    "An entry has no '=' after its label"

class InvalidFormat(PerfdataError):
    "A label isn't followed by '='"

class MissingNumber(PerfdataError):
    "An entry has no value after '='"

class NumberFormat(PerfdataError):
    "A value or threshold isn't a number"

class Perfdata(collections.namedtuple(
    'Perfdata', 'label value unit warning critical min max')):
    """A single performance data metric

    Thresholds that weren't given are NaN.
    """

    __slots__ = ()

    def metric(self):
        return dict(name=self.label, value=self.value, units=self.unit)

    def __str__(self):
        fields = [self.label + '=' + _format(self.value) + self.unit]
        fields.extend(_format(v)
                      for v in (self.warning, self.critical, self.min, self.max))
        return ';'.join(fields).rstrip(';')

def _format(v):
    if math.isnan(v):
        return ''
    if math.isinf(v):
        return repr(v)
    if v.is_integer():
        return '%d' % v
    # The value field takes no exponent.
    return format(decimal.Decimal(repr(v)), 'f')

def parse_float(text):
    """Parse a number, allowing ',' as the decimal separator

    >>> parse_float('2,34')
    2.34
    >>> parse_float('1_000')
    Traceback (most recent call last):
    ...
    zc.perfdata.perfdata.NumberFormat: invalid number '1_000'

    Numbers too big for a float are errors, but infinity may be
    given explicitly:

    >>> parse_float('1e400')
    Traceback (most recent call last):
    ...
    zc.perfdata.perfdata.NumberFormat: invalid number '1e400'
    >>> parse_float('-Inf')
    -inf
    """
    text = text.replace(',', '.')
    if '_' in text or text != text.strip() or not text.isascii():
        raise NumberFormat("invalid number %r" % text, text)
    try:
        result = float(text)
    except ValueError:
        raise NumberFormat("invalid number %r" % text, text) from None
    if (math.isinf(result) and
        text.lstrip('+-').lower() not in ('inf', 'infinity')):
        raise NumberFormat("invalid number %r" % text, text)
    return result

def tokenize(text):
    """Split performance data into entries

    Whitespace separates entries, except in quoted labels:

    >>> tokenize(" load1=0.05;7;10;0  'free space'=3MB ")
    ['load1=0.05;7;10;0', "'free space'=3MB"]

    A quote only starts a quoted label when something other than
    whitespace follows the closing quote:

    >>> tokenize("'a b' x=1")
    ["'a", "b'", 'x=1']

    >>> tokenize(' \t')
    Traceback (most recent call last):
    ...
    zc.perfdata.perfdata.SplitFailure: could not split perfdata: ' \t'
    """
    entries = split(text)
    if not entries:
        raise SplitFailure("could not split perfdata: %r" % text, text)
    return entries

def decode(entry):
    """Decode a single entry

    >>> decode("'users'=2%;3;7;0")
    Perfdata(label="'users'", value=2.0, unit='%',
             warning=3.0, critical=7.0, min=0.0, max=nan)

    Thresholds are checked from the last to the first:

    >>> decode('users=1;x;y')
    Traceback (most recent call last):
    ...
    zc.perfdata.perfdata.NumberFormat: invalid number 'y'
    """
    fields = entry.split(';')
    nfields = len(fields)
    if nfields < 1 or nfields > 5:
        raise MalformedEntry("invalid perfdata string", entry)

    # 'label'=value[UOM];[warn];[crit];[min];[max]
    thresholds = [nan] * 4
    for i in (4, 3, 2, 1):
        if nfields > i and fields[i]:
            thresholds[i - 1] = parse_float(fields[i])
    warning, critical, min_, max_ = thresholds

    field = fields[0]
    label = match_label(field).group()
    if not label:
        raise InvalidLabel("invalid label", entry)
    if len(label) == len(field):
        raise NoValue("no value found", entry)
    if field[len(label)] != '=':
        raise InvalidFormat("invalid format", entry)

    value_with_unit = field[len(label) + 1:]
    number = match_number(value_with_unit)
    if number is None:
        raise MissingNumber("missing number", entry)
    number = number.group()
    value = parse_float(number)
    unit = value_with_unit[len(number):]

    return Perfdata(label, value, unit, warning, critical, min_, max_)

def parse_perfdata(text):
    """Parse performance data into a list of Perfdata

    Any error fails the whole parse. The error raised is of the same
    class as the error for the bad entry and its text is the entry.
    """
    result = []
    for entry in tokenize(text):
        try:
            result.append(decode(entry))
        except PerfdataError as v:
            raise v.__class__(
                "could not parse perfdata: %s" % v, entry) from v
    logger.debug("parsed %s perfdata entries", len(result))
    return result
