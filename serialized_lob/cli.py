"""
Command line interface for the customer store.

    serialized-lob [--env-file FILE] create-schema
    serialized-lob [--env-file FILE] drop-schema
    serialized-lob [--env-file FILE] insert --name NAME [--id ID] [--departments FILE]
    serialized-lob [--env-file FILE] show ID
"""
import argparse
import logging
import os
import sys
from collections import OrderedDict

from dotenv import dotenv_values

from serialized_lob.config import LobConfig
from serialized_lob.exceptions import SerializedLobError
from serialized_lob.markup import codec
from serialized_lob.migrations import SchemaMigration
from serialized_lob.models import Customer
from serialized_lob.repositories import CustomerRepository

logger = logging.getLogger(__name__)


class Cli:
    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self):
        parser = argparse.ArgumentParser(
            description="Store customers and their department trees as markup LOBs."
        )
        parser.add_argument(
            '--env-file',
            dest='env_files',
            type=str,
            action='append',
            help="Path to an environment file. May be repeated; later files win.",
            default=[]
        )
        parser.add_argument(
            '--verbose', '-v',
            action='store_true',
            help="Enable debug logging."
        )
        subparsers = parser.add_subparsers(dest="command", help="Subcommand to run")
        subparsers.add_parser('create-schema', help="Create the customers table.")
        subparsers.add_parser('drop-schema', help="Drop the customers table.")

        insert_parser = subparsers.add_parser('insert', help="Insert a customer.")
        insert_parser.add_argument('--name', required=True, help="Customer name.")
        insert_parser.add_argument('--id', type=int, default=0, help="Customer id; generated when omitted.")
        insert_parser.add_argument('--departments', help="Path to a departmentList markup file.")

        show_parser = subparsers.add_parser('show', help="Print a customer and its departments.")
        show_parser.add_argument('id', type=int, help="Customer id.")
        return parser

    def load_env(self, args):
        """Merge env vars from the files given with --env-file, later files winning."""
        merged_env = []
        for env_file in args.env_files:
            if os.path.exists(env_file) and os.path.isfile(env_file):
                merged_env += list(dotenv_values(env_file).items())
            else:
                self.parser.error(f"{env_file} file not found.")
        return OrderedDict(merged_env)

    def get_config(self, args) -> LobConfig:
        config = LobConfig(env_vars=self.load_env(args))
        try:
            config.validate_env_vars()
        except ValueError as ex:
            self.parser.error(str(ex))
        return config

    def create_schema(self, config, args, out):
        SchemaMigration(config.get_db_adapter(), config.table_name).create()
        print(f"Created table {config.table_name}", file=out)

    def drop_schema(self, config, args, out):
        SchemaMigration(config.get_db_adapter(), config.table_name).drop()
        print(f"Dropped table {config.table_name}", file=out)

    def insert(self, config, args, out):
        customer = Customer(name=args.name, id=args.id)
        if args.departments:
            if not os.path.isfile(args.departments):
                self.parser.error(f"{args.departments} file not found.")
            with open(args.departments, 'r', encoding='UTF-8') as file:
                customer.read_departments(codec.string_to_element(file.read()))
        repository = CustomerRepository(config.get_db_adapter(), config.table_name)
        customer_id = customer.insert(repository)
        print(customer_id, file=out)

    def show(self, config, args, out):
        repository = CustomerRepository(config.get_db_adapter(), config.table_name)
        customer = Customer.load(args.id, repository)
        print(f"{customer.id}: {customer.name}", file=out)

        stack = [(department, 1) for department in reversed(customer.departments)]
        while stack:
            department, depth = stack.pop()
            print(f"{'  ' * depth}- {department.name}", file=out)
            stack.extend((child, depth + 1) for child in reversed(department.children))

    def run(self, argv=None, out=None) -> int:
        out = out or sys.stdout
        args = self.parser.parse_args(argv)
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

        commands = {
            'create-schema': self.create_schema,
            'drop-schema': self.drop_schema,
            'insert': self.insert,
            'show': self.show,
        }
        command = commands.get(args.command)
        if command is None:
            self.parser.print_help()
            return 2

        config = self.get_config(args)
        try:
            command(config, args, out)
        except SerializedLobError as ex:
            logger.debug("Command %s failed", args.command, exc_info=True)
            print(f"error: {ex}", file=sys.stderr)
            return 1
        return 0


def main():
    cli = Cli()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
