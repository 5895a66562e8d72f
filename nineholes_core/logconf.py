from __future__ import annotations

import logging
import os


def debug_enabled() -> bool:
    """True when NINE_HOLES_DEBUG is set to 1/true/yes/on."""
    return os.getenv('NINE_HOLES_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug_enabled() else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
