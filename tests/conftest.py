"""Shared fixtures: in-memory speech collaborators and recipes."""

import pytest

from models.recipe import Recipe
from services.speech.base import SpeechInput, SpeechOutput


class FakeSpeechOutput(SpeechOutput):
    """Records what would have been spoken."""

    def __init__(self):
        self.spoken = []
        self.current = None
        self.paused = False
        self.pause_calls = 0
        self.resume_calls = 0
        self.cancel_calls = 0

    def speak(self, text):
        self.cancel_all()
        self.spoken.append(text)
        self.current = text

    def pause(self):
        self.pause_calls += 1
        self.paused = True

    def resume(self):
        self.resume_calls += 1
        self.paused = False

    def cancel_all(self):
        self.cancel_calls += 1
        self.current = None
        self.paused = False


class FakeSpeechInput(SpeechInput):
    """SpeechInput driven by the test instead of a microphone."""

    def __init__(self, fail_on_start=False):
        super().__init__()
        self.fail_on_start = fail_on_start
        self.start_calls = 0
        self.stop_calls = 0
        self._listening = False

    @property
    def is_listening(self):
        return self._listening

    def start_continuous(self):
        self.start_calls += 1
        if self.fail_on_start:
            raise OSError("no input device")
        self._listening = True

    def stop(self):
        self.stop_calls += 1
        self._listening = False

    def hear(self, event):
        """Deliver an event as if the recognizer produced it."""
        self._emit(event)


def make_recipe(step_count, recipe_id=1, title="Test Soup", ingredients=None):
    return Recipe(
        id=recipe_id,
        title=title,
        ingredients=ingredients or ["water", "salt"],
        steps=[f"Do thing {i}" for i in range(1, step_count + 1)],
    )


@pytest.fixture
def speech_output():
    return FakeSpeechOutput()


@pytest.fixture
def speech_input():
    return FakeSpeechInput()


@pytest.fixture
def five_step_recipe():
    return make_recipe(5)
