#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Legacy entry point for packaging tools that do not read pyproject.toml.
All metadata lives in pyproject.toml.
"""

import setuptools

if __name__ == "__main__":
    setuptools.setup()
