# -*- coding: utf-8 -*-
"""Configuration package — settings and static page content."""
