# -*- coding: utf-8 -*-
"""
Pipeline package — CLI entry points for the GEO content stack.
Each step runs with no arguments, prints a JSON summary to stdout and
logs to stderr.
"""
