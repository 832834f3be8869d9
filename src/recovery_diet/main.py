"""Command line entry point: load sample data into the configured store."""

from recovery_diet.app_logging import configure_logging
from recovery_diet.config import Settings
from recovery_diet.containers import build_container
from recovery_diet.seed import reseed


def main() -> None:
    """Reseed the configured storage backend and print what was written."""
    settings = Settings()
    configure_logging(settings.log_level)
    container = build_container(settings)
    summary = reseed(container)
    print(f"Recovery Diet Tracker: seeded {settings.storage_backend} storage")
    print(
        f"  users={summary.users} foods={summary.foods} recipes={summary.recipes} "
        f"meal_plans={summary.meal_plans} grocery_lists={summary.grocery_lists} "
        f"progress={summary.progress}"
    )


if __name__ == "__main__":
    main()
