from django.core.management.base import BaseCommand, CommandError

from catalog.loader import CatalogLoadError, get_catalog, load_catalog


class Command(BaseCommand):
    help = "Print the product catalog (configured one, or a CSV given with --csv)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--csv",
            dest="csv_path",
            default="",
            help="Validate and print this catalog CSV instead of the configured catalog.",
        )

    def handle(self, *args, **options):
        csv_path = (options.get("csv_path") or "").strip()

        try:
            catalog = load_catalog(csv_path) if csv_path else get_catalog()
        except CatalogLoadError as exc:
            raise CommandError(str(exc)) from exc

        for tag, product in catalog.items():
            self.stdout.write(
                f"{tag:12} {product.name:30} {product.price:>6}  {product.category}"
            )

        self.stdout.write(self.style.SUCCESS(f"{len(catalog)} products"))
