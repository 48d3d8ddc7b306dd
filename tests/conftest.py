import pytest
from FlashcardsModule import FlashcardStore


class FakeUI:
    """Scripted stand-in for ConsoleUI that records everything shown."""

    def __init__(self, selections=(), confirms=(), texts=()):
        self.selections = list(selections)
        self.confirms = list(confirms)
        self.texts = list(texts)
        self.messages = []
        self.prompts = []
        self.tables = []

    def _log(self, kind, message):
        self.messages.append((kind, message))

    def info(self, message):
        self._log("info", message)

    def warning(self, message):
        self._log("warning", message)

    def error(self, message):
        self._log("error", message)

    def success(self, message):
        self._log("success", message)

    def header(self, text):
        self._log("header", text)

    def section(self, text):
        self._log("section", text)

    def show(self, text, style=None):
        self._log("show", text)

    def table(self, headers, rows):
        self.tables.append((headers, rows))

    def pause(self, prompt):
        self.prompts.append(("pause", prompt, None))

    def confirm(self, prompt, default=True):
        self.prompts.append(("confirm", prompt, None))
        return self.confirms.pop(0)

    def text_input(self, prompt, default=None):
        self.prompts.append(("text", prompt, None))
        return self.texts.pop(0)

    def select_one(self, label, options):
        self.prompts.append(("select", label, list(options)))
        choice = self.selections.pop(0)
        return choice(options) if callable(choice) else choice

    def of_kind(self, kind):
        return [m for k, m in self.messages if k == kind]


@pytest.fixture
def fake_ui():
    return FakeUI


@pytest.fixture
def deck_path(tmp_path):
    return tmp_path / "flashcards.json"


@pytest.fixture
def store(deck_path):
    s = FlashcardStore(str(deck_path))
    s.load()
    return s
