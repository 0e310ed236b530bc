"""Tests for VoiceSession: event serialization and listening supervision."""

import threading
import time
from unittest.mock import Mock

from models.navigator import CommandOutcome
from models.recognition import RecognitionEvent
from services.speech.edge_output import EdgeSpeechOutput
from services.voice_navigator import VoiceNavigator
from services.voice_session import VoiceSession
from tests.conftest import FakeSpeechInput, FakeSpeechOutput, make_recipe


def new_session(speech_input=None):
    speech_input = speech_input or FakeSpeechInput()
    navigator = VoiceNavigator(FakeSpeechOutput(), speech_input)
    return VoiceSession(navigator), speech_input


def wait_until(condition, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(0.01)
    return False


class TestVoiceSession:
    """Test suite for VoiceSession."""

    def test_start_uses_recipe_steps_and_title(self):
        session, speech_input = new_session()

        state = session.start(make_recipe(3, title="Pancakes"))

        assert state.active is True
        assert "Pancakes" in state.last_message
        assert "Do thing 1" in state.last_message
        assert speech_input.is_listening is True

    def test_binds_itself_to_speech_input(self):
        session, speech_input = new_session()
        session.start(make_recipe(3))

        speech_input.hear(RecognitionEvent.result("next"))

        assert session.pending == 1
        results = session.drain()
        assert [r.outcome for r in results] == [CommandOutcome.ADVANCED]

    def test_drain_handles_events_in_order(self):
        session, _ = new_session()
        session.start(make_recipe(4))

        session.submit_transcript("next")
        session.submit_transcript("next")
        session.submit_transcript("back")
        session.submit_transcript("repeat")
        results = session.drain()

        assert [r.state.step_index for r in results] == [1, 2, 1, 1]
        assert results[-1].message == "Repeating Step 2: Do thing 2"
        assert session.pending == 0

    def test_errors_produce_no_results(self):
        session, _ = new_session()
        session.start(make_recipe(3))

        session.submit_error("no-speech")
        session.submit_error("network")

        assert session.drain() == []
        assert session.state.last_message == "Speech recognition error: network."

    def test_end_restarts_listening_while_active(self):
        session, speech_input = new_session()
        session.start(make_recipe(3))
        speech_input.stop()

        session.submit(RecognitionEvent.end())
        session.drain()

        assert speech_input.start_calls == 2
        assert speech_input.is_listening is True

    def test_end_does_not_restart_after_stop(self):
        session, speech_input = new_session()
        session.start(make_recipe(3))

        session.submit_transcript("stop")
        session.submit(RecognitionEvent.end())
        session.drain()

        assert session.state.active is False
        assert speech_input.start_calls == 1
        assert speech_input.is_listening is False

    def test_end_does_not_restart_in_message_only_mode(self):
        speech_input = FakeSpeechInput(fail_on_start=True)
        session, _ = new_session(speech_input)
        session.start(make_recipe(3))

        session.submit(RecognitionEvent.end())
        session.drain()

        assert session.state.hands_free is False
        assert speech_input.start_calls == 1

    def test_restart_failure_is_logged_not_raised(self):
        session, speech_input = new_session()
        session.start(make_recipe(3))
        speech_input.fail_on_start = True

        session.submit(RecognitionEvent.end())
        session.drain()

        assert session.state.active is True

    def test_threaded_submissions_are_handled_one_at_a_time(self):
        session, _ = new_session()
        session.start(make_recipe(200))
        in_flight = []
        overlaps = []
        original = session.navigator.handle_command

        def tracking_handle(transcript):
            in_flight.append(transcript)
            if len(in_flight) > 1:
                overlaps.append(transcript)
            try:
                return original(transcript)
            finally:
                in_flight.pop()

        session.navigator.handle_command = tracking_handle
        session.start_worker()

        def produce():
            for _ in range(25):
                session.submit_transcript("next")

        producers = [threading.Thread(target=produce) for _ in range(4)]
        for thread in producers:
            thread.start()
        for thread in producers:
            thread.join()

        assert wait_until(lambda: session.state.step_index == 100)
        assert overlaps == []
        session.close()

    def test_worker_survives_a_failing_event(self):
        session, _ = new_session()
        session.start(make_recipe(3))
        session.navigator.handle_command = Mock(side_effect=[RuntimeError("boom"), Mock()])
        session.start_worker()

        session.submit_transcript("next")
        session.submit_transcript("next")

        assert wait_until(lambda: session.navigator.handle_command.call_count == 2)
        session.close()

    def test_close_is_idempotent(self):
        session, speech_input = new_session()
        session.start(make_recipe(3))
        session.start_worker()

        session.close()
        session.close()

        assert session.state.active is False
        assert speech_input.stop_calls == 1
        assert session._worker is None

    def test_context_manager_closes(self):
        speech_input = FakeSpeechInput()
        navigator = VoiceNavigator(FakeSpeechOutput(), speech_input)

        with VoiceSession(navigator) as session:
            session.start(make_recipe(2))
            assert session.state.active is True

        assert navigator.state.active is False
        assert speech_input.is_listening is False

    def test_commands_never_wait_on_synthesis(self):
        audio = Mock()
        audio.text_to_speech.side_effect = AssertionError("synthesized while handling a command")
        speech_input = FakeSpeechInput()
        navigator = VoiceNavigator(EdgeSpeechOutput(audio=audio), speech_input)
        session = VoiceSession(navigator)
        session.start(make_recipe(3))

        session.submit_transcript("next")
        session.submit_transcript("stop")
        session.drain()
        session.close()

        audio.text_to_speech.assert_not_called()
