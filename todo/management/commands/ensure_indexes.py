from django.apps import apps
from django.core.management.base import BaseCommand, CommandError
from todo_project.db.migrations import run_all_migrations


class Command(BaseCommand):
    help = "Create the MongoDB indexes the API relies on (unique users.email, tasks.userEmail)"

    def handle(self, *args, **options):
        db_manager = apps.get_app_config("todo").db_manager

        self.stdout.write(self.style.SUCCESS(f"Creating indexes in database '{db_manager.db_name}'..."))

        if not run_all_migrations(db_manager):
            raise CommandError("Some index migrations failed!")

        self.stdout.write(self.style.SUCCESS("All indexes are in place!"))
