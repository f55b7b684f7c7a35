from dbutils.pooled_db import PooledDB


class PooledConnectionPlugin:
    """
    Manages a pool of database connections using PooledDB.

    The plugin provides a `connection_resolver` and a `connection_closer` to pass
    to `MySqlAdapter` or `PostgreSQLAdapter`. The adapter then borrows a pooled
    connection when entering its context and returns it when leaving.

        pool = PooledConnectionPlugin("postgres", host=..., port=..., user=..., password=..., database=...)
        adapter = PostgreSQLAdapter(..., connection_resolver=pool.connection_resolver,
                                    connection_closer=pool.connection_closer)
    """

    SUPPORTED_DATABASES = ("mysql", "postgres")

    def __init__(self, database_type="mysql", max_connections=None, **connection_kwargs):
        """
        :param database_type: The type of database to use ("mysql" or "postgres").
        :param max_connections: Maximum number of connections the pool may open.
        :param connection_kwargs: Connection parameters handed to the driver.
        :raises ValueError: If an unsupported database type is provided.
        """

        if database_type not in self.SUPPORTED_DATABASES:
            raise ValueError(
                f"Invalid database type specified: {database_type}. Must be one of: {self.SUPPORTED_DATABASES}"
            )
        self.database_type = database_type

        if database_type == "postgres":
            import psycopg2
            creator = psycopg2
        else:
            import pymysql
            creator = pymysql
            connection_kwargs.setdefault("cursorclass", pymysql.cursors.DictCursor)

        self.pool = PooledDB(
            creator=creator,
            maxconnections=max_connections,
            **connection_kwargs
        )

    def connection_resolver(self, *args, **kwargs):
        """
        Get a database connection from the pool. Connection arguments given by
        the adapter are ignored; the pool was configured up front.
        """
        return self.pool.connection()

    def connection_closer(self, adapter):
        """Closes the adapter's cursor and returns its connection to the pool."""
        if adapter._cursor is not None:
            adapter._cursor.close()
            adapter._cursor = None

        if adapter._connection is not None:
            adapter._connection.close()
            adapter._connection = None
