"""
tokenomics_engine — integer token-economics calculations for a launchpad / AMM.

Библиотека ничего не пишет в лог, пока приложение явно не включит её:
    from loguru import logger
    logger.enable("tokenomics_engine")
"""

from loguru import logger

__version__ = "0.1.0"

logger.disable("tokenomics_engine")
