# -*- coding: utf-8 -*-
"""Module entry point for `python -m peoplekeeper`."""

from __future__ import annotations

from peoplekeeper.main import main


if __name__ == "__main__":
    raise SystemExit(main())
