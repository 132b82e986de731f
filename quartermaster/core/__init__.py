#!/usr/bin/env python

"""
    Core module for Quartermaster: storage, models and the lending ledger

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""
