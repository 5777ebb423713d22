##############################################################################
#
# Copyright (c) Zope Foundation and Contributors.
# All Rights Reserved.
#
# This software is subject to the provisions of the Zope Public License,
# Version 2.0 (ZPL).  A copy of the ZPL should accompany this distribution.
# THIS SOFTWARE IS PROVIDED "AS IS" AND ANY AND ALL EXPRESS OR IMPLIED
# WARRANTIES ARE DISCLAIMED, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED
# WARRANTIES OF TITLE, MERCHANTABILITY, AGAINST INFRINGEMENT, AND FITNESS
# FOR A PARTICULAR PURPOSE.
#
##############################################################################
import doctest
import manuel.doctest
import manuel.testing
import unittest

def test_suite():
    optionflags = doctest.NORMALIZE_WHITESPACE | doctest.ELLIPSIS
    return unittest.TestSuite((
        manuel.testing.TestSuite(
            manuel.doctest.Manuel(optionflags=optionflags),
            'perfdata.rst'),
        doctest.DocTestSuite('zc.perfdata.perfdata', optionflags=optionflags),
        doctest.DocTestSuite('zc.perfdata.output', optionflags=optionflags),
        doctest.DocTestSuite('zc.perfdata.metrics', optionflags=optionflags),
        ))

def load_tests(loader, tests, pattern):
    return test_suite()
