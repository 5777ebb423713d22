"""Pass performance data on to metrics handlers

A metrics handler is called with a timestamp, name, value and units
for each metric:

    >>> def handler(timestamp, name, value, units=''):
    ...     print(timestamp, name, value, units)

    >>> import zc.perfdata
    >>> report(handler,
    ...        zc.perfdata.parse_perfdata("load1=0.05;7;10;0 'free /'=3MB"),
    ...        '2014-12-13T16:14:47', prefix='//test.example.com/load#')
    2014-12-13T16:14:47 //test.example.com/load#load1 0.05
    2014-12-13T16:14:47 //test.example.com/load#'free /' 3.0 MB

Without a timestamp, the current time is used:

    >>> import mock
    >>> with mock.patch('time.time', return_value=1418487287.82):
    ...     report(handler, zc.perfdata.parse_perfdata('users=2'))
    2014-12-13T16:14:47.8...+00:00 users 2.0
"""
import datetime
import json
import logging
import time

def report(handler, perfdata, timestamp=None, prefix=''):
    if timestamp is None:
        timestamp = datetime.datetime.fromtimestamp(
            time.time(), datetime.timezone.utc).isoformat()
    for p in perfdata:
        m = p.metric()
        handler(timestamp, prefix + m['name'], m['value'], m['units'])

class LogMetrics:
    """Log metrics as JSON, one INFO message per metric

    The logger is named by the config's name option, "metrics" by
    default.  Keys are sorted, so a metric always logs the same text
    and log lines can be compared or grepped by position.

    >>> from zope.testing import loggingsupport
    >>> handler = loggingsupport.InstalledHandler('load')
    >>> metrics = LogMetrics(dict(name='load'))
    >>> metrics('2014-12-13T16:14:47', 'load1', 0.05)
    >>> print(handler)
    load INFO
      {"name": "load1", "timestamp": "2014-12-13T16:14:47",
       "units": "", "value": 0.05}
    >>> handler.uninstall()
    """

    def __init__(self, config):
        self.logger = logging.getLogger(config.get('name', 'metrics'))

    def __call__(self, timestamp, name, value, units=''):
        self.logger.info(json.dumps(dict(
            timestamp=timestamp, name=name, value=value, units=units),
                                    sort_keys=True))
