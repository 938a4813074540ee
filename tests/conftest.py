"""Pytest configuration and shared fixtures for chat client auth tests."""

import pytest
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from chat_auth.auth.exceptions import StoreWriteError
from chat_auth.config.settings import SettingsManager
from chat_auth.events import ResetEvent


class FakeSecureStore:
    """In-memory secure store that records every call."""

    def __init__(self, fail_writes: bool = False):
        self.entries: Dict[Tuple[str, str], str] = {}
        self.calls: List[tuple] = []
        self.fail_writes = fail_writes

    def get(self, service: str, account: str) -> Optional[str]:
        self.calls.append(("get", service, account))
        return self.entries.get((service, account))

    def set(self, service: str, account: str, secret: str) -> None:
        self.calls.append(("set", service, account, secret))
        if self.fail_writes:
            raise StoreWriteError(service, account, RuntimeError("keychain locked"))
        self.entries[(service, account)] = secret

    def delete(self, service: str, account: str) -> bool:
        self.calls.append(("delete", service, account))
        return self.entries.pop((service, account), None) is not None

    @property
    def writes(self) -> List[tuple]:
        return [c for c in self.calls if c[0] in ("set", "delete")]


class RecordingSignal:
    """Signal sink collecting emitted events."""

    def __init__(self):
        self.events: List[ResetEvent] = []

    def emit(self, event: ResetEvent) -> None:
        self.events.append(event)


class ScriptedUI:
    """UserInteraction double returning preset answers."""

    def __init__(self, choice: Optional[str] = None, free_text: Optional[str] = None):
        self.choice = choice
        self.free_text = free_text
        self.choice_prompts: List[Tuple[str, List[str]]] = []
        self.text_prompts: List[Tuple[str, str]] = []
        self.issues: List[Tuple[str, str]] = []

    def prompt_choice(self, message: str, options: Sequence[str]) -> Optional[str]:
        self.choice_prompts.append((message, list(options)))
        return self.choice

    def prompt_free_text(self, prompt: str, placeholder: str) -> Optional[str]:
        self.text_prompts.append((prompt, placeholder))
        return self.free_text

    def file_issue(self, title: str, body: str) -> None:
        self.issues.append((title, body))


@pytest.fixture
def temp_settings_file(tmp_path: Path) -> Path:
    """Provide a temporary settings file path for testing."""
    return tmp_path / "settings.json"


@pytest.fixture
def settings(temp_settings_file: Path) -> SettingsManager:
    """SettingsManager backed by a temporary file."""
    return SettingsManager(config_path=temp_settings_file)


@pytest.fixture
def secure_store() -> FakeSecureStore:
    return FakeSecureStore()


@pytest.fixture
def failing_secure_store() -> FakeSecureStore:
    """Secure store whose writes always fail."""
    return FakeSecureStore(fail_writes=True)


@pytest.fixture
def signal() -> RecordingSignal:
    return RecordingSignal()


@pytest.fixture
def make_ui():
    """Factory for ScriptedUI doubles."""
    def _make(choice: Optional[str] = None, free_text: Optional[str] = None) -> ScriptedUI:
        return ScriptedUI(choice=choice, free_text=free_text)
    return _make
