# Filename: __main__.py
# Author: Rich Lewis @RichLewis007
# Description: Allows running the tool with ``python -m ptrash``.

from __future__ import annotations

from .cli import main

raise SystemExit(main())
