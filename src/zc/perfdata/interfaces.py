"""Performance data APIs.

Importing this module declares that the zc.perfdata classes provide
these interfaces.

Don't import this module unless you have zope.interface in the path.
zc.perfdata doesn't otherwise import it.
"""

import zope.interface

import zc.perfdata.metrics
import zc.perfdata.perfdata

class IPerfdata(zope.interface.Interface):
    """A single performance data metric

    Records are immutable.  Absent thresholds are NaN, so test for
    them with math.isnan rather than ==.  str() renders a record as
    performance data.
    """

    label = zope.interface.Attribute(
        "Metric label, with quotes, if any, as given")

    value = zope.interface.Attribute("Current value, a float")

    unit = zope.interface.Attribute(
        "Unit of measure as given, possibly empty")

    warning = zope.interface.Attribute("Warning threshold or NaN")

    critical = zope.interface.Attribute("Critical threshold or NaN")

    min = zope.interface.Attribute("Minimum value or NaN")

    max = zope.interface.Attribute("Maximum value or NaN")

    def metric():
        """Return a metric dictionary

        The dictionary has name, value and units items, suitable for
        passing to a metrics handler.
        """

class IMetrics(zope.interface.Interface):
    """Interface for handling metrics data
    """

    def __call__(timestamp, name, value, units=''):
        "Handle a single metric value"

zope.interface.classImplements(zc.perfdata.perfdata.Perfdata, IPerfdata)
zope.interface.classImplements(zc.perfdata.metrics.LogMetrics, IMetrics)
