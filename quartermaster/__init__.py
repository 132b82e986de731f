#!/usr/bin/env python

"""
    Quartermaster, an equipment lending ledger

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

__version__ = '0.1.0'
