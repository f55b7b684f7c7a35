from .schema import SchemaMigration
