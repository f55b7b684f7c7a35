"""
Config classes that read the process environment and/or a .env file.
"""
import os
import logging
from abc import abstractmethod
from typing import List, Optional

from dotenv import load_dotenv

from serialized_lob.data.base import DbAdapter
from serialized_lob.data.factory import adapter_from_url

logger = logging.getLogger(__name__)


class BaseConfig():
    """
    Config class that loads a .env file on top of the process environment.
    """
    def __init__(self, dotenv_path: Optional[str] = None, env_vars: Optional[dict] = None):
        load_dotenv(dotenv_path)
        # Get all environment variables and store them in a dictionary
        self.env_vars = {key: os.getenv(key) for key in os.environ}
        # Explicitly given values take precedence over the environment
        if env_vars:
            self.env_vars.update(env_vars)

    def get_env_var(self, var_name: str, default=None):
        """
        Retrieve the value of the specified environment variable
        Args:
            var_name (str) : Name of the env var to fetch
            default : Value returned when the var is not set
        """
        if var_name in self.env_vars.keys():
            return self.env_vars[var_name]
        else:
            logger.debug("Variable %s not found.", var_name)
            return default

    @abstractmethod
    def validate_env_vars(self):
        """
        Abstract method for validation of the env vars.
        """


class LobConfig(BaseConfig):
    """
    Database configuration for the customer store.

    `LOB_DATABASE_URL` wins when set. Otherwise `LOB_DB_ENGINE` selects the
    backend ("sqlite", "postgres" or "mysql", default "sqlite") and the
    engine's own variables are read:

        sqlite:   SQLITE_PATH (default "serialized_lob.db")
        postgres: POSTGRES_HOST, POSTGRES_PORT, POSTGRES_USER, POSTGRES_PASSWORD, POSTGRES_DB
        mysql:    MYSQL_HOST, MYSQL_PORT, MYSQL_USER, MYSQL_PASSWORD, MYSQL_DATABASE
    """

    SUPPORTED_ENGINES = ('sqlite', 'postgres', 'mysql')
    REQUIRED_ENV_VARS = {
        'sqlite': [],
        'postgres': ['POSTGRES_HOST', 'POSTGRES_PORT', 'POSTGRES_USER', 'POSTGRES_PASSWORD', 'POSTGRES_DB'],
        'mysql': ['MYSQL_HOST', 'MYSQL_PORT', 'MYSQL_USER', 'MYSQL_PASSWORD', 'MYSQL_DATABASE'],
    }

    @property
    def database_url(self) -> Optional[str]:
        return self.get_env_var('LOB_DATABASE_URL')

    @property
    def engine(self) -> str:
        return (self.get_env_var('LOB_DB_ENGINE') or 'sqlite').lower()

    @property
    def table_name(self) -> str:
        return self.get_env_var('LOB_TABLE_NAME') or 'customers'

    def missing_env_vars(self) -> List[str]:
        return [var for var in self.REQUIRED_ENV_VARS.get(self.engine, []) if not self.get_env_var(var)]

    def validate_env_vars(self):
        """
        Raises ValueError when the configured engine is unknown or misses variables.
        """
        if self.database_url:
            return
        if self.engine not in self.SUPPORTED_ENGINES:
            raise ValueError(
                f"Invalid LOB_DB_ENGINE: {self.engine}. Must be one of: {self.SUPPORTED_ENGINES}")
        missing = self.missing_env_vars()
        if missing:
            raise ValueError(f"Missing environment variables: {', '.join(missing)}")

    def get_db_adapter(self, **kwargs) -> DbAdapter:
        """Builds the adapter described by the configuration."""
        self.validate_env_vars()

        if self.database_url:
            return adapter_from_url(self.database_url, **kwargs)

        if self.engine == 'sqlite':
            from serialized_lob.data.sqlite import SqliteAdapter
            return SqliteAdapter(self.get_env_var('SQLITE_PATH') or 'serialized_lob.db', **kwargs)

        if self.engine == 'postgres':
            from serialized_lob.data.postgresql import PostgreSQLAdapter
            return PostgreSQLAdapter(
                host=self.get_env_var('POSTGRES_HOST'),
                port=int(self.get_env_var('POSTGRES_PORT')),
                user=self.get_env_var('POSTGRES_USER'),
                password=self.get_env_var('POSTGRES_PASSWORD'),
                database=self.get_env_var('POSTGRES_DB'),
                **kwargs
            )

        from serialized_lob.data.mysql import MySqlAdapter
        return MySqlAdapter(
            host=self.get_env_var('MYSQL_HOST'),
            port=int(self.get_env_var('MYSQL_PORT')),
            user=self.get_env_var('MYSQL_USER'),
            password=self.get_env_var('MYSQL_PASSWORD'),
            database=self.get_env_var('MYSQL_DATABASE'),
            **kwargs
        )
