r"""Split nagios plugin output into text and performance data

    >>> def ppp(text):
    ...     text, perfdata = parse_output(text)
    ...     print(repr(text))
    ...     for p in perfdata:
    ...         print(p)

    >>> ppp("DISK OK - free space: / 3326 MB (56%);")
    'DISK OK - free space: / 3326 MB (56%);\n'

    >>> ppp(
    ... "DISK OK - free space: / 3326 MB (56%); | /=2643MB;5948;5958;0;5968")
    'DISK OK - free space: / 3326 MB (56%); \n'
    /=2643MB;5948;5958;0;5968

Long output may carry more performance data after a second '|',
continuing to the end of the output:

    >>> ppp(
    ... '''DISK OK - free space: / 3326 MB (56%); | /=2643MB;5948;5958;0;5968
    ... / 15272 MB (77%);
    ... /boot 68 MB (69%);
    ... /var/log 819 MB (84%); | /boot=68MB;88;93;0;98
    ... /var/log=818MB;970;975;0;980''')
    'DISK OK - free space: / 3326 MB (56%);
      \n/ 15272 MB (77%);\n/boot 68 MB (69%);\n/var/log 819 MB (84%); '
    /=2643MB;5948;5958;0;5968
    /boot=68MB;88;93;0;98
    /var/log=818MB;970;975;0;980

    >>> ppp("| 'ha ha ha'=3has")
    '\n'
    'ha ha ha'=3has

A '|' with nothing after it is no performance data:

    >>> ppp("PING OK |  ")
    'PING OK \n'

but bad performance data is an error:

    >>> ppp("PING OK | rta=fast")
    Traceback (most recent call last):
    ...
    zc.perfdata.perfdata.MissingNumber: could not parse perfdata:
       missing number
"""
import zc.perfdata.perfdata

def parse_output(text):
    texts = text.split('\n', 1)
    first = texts[0]
    rest = texts[1] if len(texts) > 1 else ''
    first = first.split('|', 1)
    rest = rest.split('|', 1)
    perf = ((first[1] + ' ' if len(first) > 1 else '') +
            (rest[1].replace('\n', ' ') if len(rest) > 1 else ''))
    return (
        first[0] + '\n' + rest[0],
        zc.perfdata.perfdata.parse_perfdata(perf) if perf.strip() else [],
        )
