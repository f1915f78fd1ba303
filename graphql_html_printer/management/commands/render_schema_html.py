from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from django.utils.module_loading import import_string
from graphene_django.settings import graphene_settings
from graphql import GraphQLError, build_schema

from ...exceptions import SchemaRenderError
from ...printer import DocumentationConfig, DocumentationGenerator


class Command(BaseCommand):
    help = "Render the GraphQL schema as cross-linked HTML documentation."

    def add_arguments(self, parser):
        source = parser.add_mutually_exclusive_group()
        source.add_argument(
            "--schema",
            dest="schema_path",
            help="Dotted path to a graphene or graphql-core schema (default: GRAPHENE['SCHEMA']).",
        )
        source.add_argument(
            "--sdl",
            dest="sdl_file",
            help="Path to a file containing the schema in SDL.",
        )
        parser.add_argument(
            "--out",
            dest="output_file",
            help="Output file path (default: stdout).",
        )
        parser.add_argument(
            "--fragment",
            action="store_true",
            help="Output only the documentation markup, without the HTML page around it.",
        )
        parser.add_argument(
            "--schema-name",
            dest="schema_name",
            help="Schema name used to look up GRAPHQL_HTML_PRINTER_SCHEMAS settings.",
        )

    def handle(self, *args, **options):
        schema = self._load_schema(options)

        config = DocumentationConfig.from_settings(options["schema_name"])
        if options["fragment"]:
            config.full_page = False

        try:
            output = DocumentationGenerator(config).generate_html_documentation(schema)
        except SchemaRenderError as e:
            raise CommandError(f"Rendering failed: {e}")

        if options["output_file"]:
            with open(options["output_file"], "w", encoding="utf-8") as f:
                f.write(output)
            self.stdout.write(self.style.SUCCESS(f"Documentation written to {options['output_file']}"))
        else:
            self.stdout.write(output)

    def _load_schema(self, options):
        if options["sdl_file"]:
            try:
                return build_schema(Path(options["sdl_file"]).read_text(encoding="utf-8"))
            except OSError as e:
                raise CommandError(f"Cannot read SDL file: {e}")
            except (GraphQLError, TypeError) as e:
                raise CommandError(f"Invalid SDL: {e}")

        if options["schema_path"]:
            try:
                return import_string(options["schema_path"])
            except ImportError as e:
                raise CommandError(f"Cannot import schema '{options['schema_path']}': {e}")

        schema = graphene_settings.SCHEMA
        if not schema:
            raise CommandError("GRAPHENE.SCHEMA is not configured or could not be loaded.")
        return schema
