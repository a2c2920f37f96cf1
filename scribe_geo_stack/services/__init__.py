# -*- coding: utf-8 -*-
"""Services package — harvesting, matching, rendering and site rewriting."""
