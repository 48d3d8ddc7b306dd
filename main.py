import logging
import random
import sys

from FlashcardsModule import FlashcardLoadError, FlashcardStore
from frontend_service import ConsoleUI, FlashcardApp
from tools.settings import load_settings

logger = logging.getLogger(__name__)


def configure_logging(level: str, log_file=None):
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=log_file,
    )


def open_store(file_path: str, ui) -> FlashcardStore:
    """Load the deck, falling back to an empty one when the file is unusable."""
    store = FlashcardStore(file_path)
    try:
        count = store.load()
    except FlashcardLoadError as e:
        ui.error(str(e))
        ui.warning("Could not load existing cards. Starting with an empty set.")
        return store
    if count:
        ui.info(f"Loaded {count} flashcards from '{file_path}'.")
    else:
        ui.warning(f"No flashcards found in '{file_path}'. Starting with an empty set.")
    return store


def main(argv=None) -> int:
    settings = load_settings(argv)
    configure_logging(settings.log_level, settings.log_file)

    if settings.seed is not None:
        rng = random.Random(settings.seed)
        option_rng = random.Random(settings.seed + 1)
    else:
        rng, option_rng = random.Random(), random.Random()

    ui = ConsoleUI()
    store = open_store(settings.file_path, ui)
    app = FlashcardApp(store, ui, rng=rng, option_rng=option_rng, quiz_delay=settings.quiz_delay)
    try:
        app.run()
    except (KeyboardInterrupt, EOFError):
        ui.show("")
        ui.info("Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
