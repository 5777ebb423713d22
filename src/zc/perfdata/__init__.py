"""Nagios performance data parsing
"""
from zc.perfdata.perfdata import (
    Perfdata, PerfdataError, SplitFailure, MalformedEntry, InvalidLabel,
    NoValue, InvalidFormat, MissingNumber, NumberFormat, parse_perfdata)
