# -*- coding: utf-8 -*-
"""
Internal utilities (data model, error variants, config, constants, console helpers).

The user-facing names are re-exported by the top-level package. Import anything
else from its concrete module, for example:

    from netpaths.utils.constant import REASON_INVALID_NODE
"""

from __future__ import annotations

from netpaths.utils.config import GraphConfig

__all__: list[str] = ["GraphConfig"]
