"""data module"""

from .base import DbAdapter
from .sqlite import SqliteAdapter
from .factory import adapter_from_url
import logging

logger = logging.getLogger(__name__)


# Conditional imports - only import if dependencies are available
try:
    from .mysql import MySqlAdapter
except ImportError:
    logger.info("MySqlAdapter not loaded - probably, missing dependencies")
    pass

try:
    from .postgresql import PostgreSQLAdapter
except ImportError:
    logger.info("PostgreSQLAdapter not loaded - probably, missing dependencies")
    pass
