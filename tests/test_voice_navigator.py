"""Tests for the hands-free step navigator."""

import pytest

from models.navigator import Command, CommandOutcome, NavigatorStatus
from services.voice_navigator import (
    COMPLETION_MESSAGE,
    FAREWELL_MESSAGE,
    FIRST_STEP_MESSAGE,
    HANDS_FREE_UNSUPPORTED_MESSAGE,
    PAUSED_MESSAGE,
    VoiceNavigator,
    classify_command,
)
from tests.conftest import FakeSpeechInput, FakeSpeechOutput


STEPS = ["Chop the onion", "Fry the onion", "Add the tomatoes", "Simmer", "Serve"]


def started(steps=STEPS, speech_input=None):
    navigator = VoiceNavigator(FakeSpeechOutput(), speech_input or FakeSpeechInput())
    navigator.start(steps, title="Tomato Sauce")
    return navigator


class TestClassifyCommand:
    """Keyword classification, first match wins."""

    @pytest.mark.parametrize("transcript,expected", [
        ("next", Command.NEXT),
        ("okay next step please", Command.NEXT),
        ("repeat that", Command.REPEAT),
        ("go back", Command.BACK),
        ("previous", Command.BACK),
        ("pause", Command.PAUSE),
        ("resume", Command.RESUME),
        ("stop", Command.STOP),
        ("exit", Command.STOP),
        ("how much salt", Command.NONE),
        ("", Command.NONE),
    ])
    def test_keywords(self, transcript, expected):
        assert classify_command(transcript)[0] == expected

    def test_go_to_step_captures_number(self):
        assert classify_command("please go to step 12") == (Command.GO_TO_STEP, 12)

    def test_next_wins_over_back(self):
        # Containment plus ordering: "next" is checked first
        assert classify_command("go back to next one")[0] == Command.NEXT

    def test_back_wins_over_stop(self):
        assert classify_command("stop and go back")[0] == Command.BACK

    def test_go_to_step_without_number_is_not_a_jump(self):
        assert classify_command("go to step three")[0] == Command.NONE


class TestStart:
    """Starting a guided session."""

    def test_start_sets_first_step_and_speaks_intro(self):
        output = FakeSpeechOutput()
        speech_input = FakeSpeechInput()
        navigator = VoiceNavigator(output, speech_input)

        state = navigator.start(STEPS, title="Tomato Sauce")

        assert state.step_index == 0
        assert state.active is True
        assert state.paused is False
        assert state.hands_free is True
        assert state.status == NavigatorStatus.LISTENING
        assert state.last_message == (
            "Let's start cooking Tomato Sauce. Step 1: Chop the onion. "
            "Say 'Next' when you're ready."
        )
        assert output.spoken == [state.last_message]
        assert speech_input.start_calls == 1

    @pytest.mark.parametrize("count", [1, 2, 7])
    def test_start_message_contains_first_step(self, count):
        steps = [f"Step text {i}" for i in range(count)]
        navigator = VoiceNavigator(FakeSpeechOutput())

        state = navigator.start(steps)

        assert state.step_index == 0
        assert "Step text 0" in state.last_message

    def test_empty_steps_rejected(self):
        navigator = VoiceNavigator(FakeSpeechOutput())

        with pytest.raises(ValueError):
            navigator.start([])
        assert navigator.state.active is False

    def test_without_speech_input_runs_message_only(self):
        output = FakeSpeechOutput()
        navigator = VoiceNavigator(output)

        state = navigator.start(STEPS)

        assert state.active is True
        assert state.hands_free is False
        assert "Chop the onion" in state.last_message
        assert HANDS_FREE_UNSUPPORTED_MESSAGE in state.last_message
        assert output.spoken == [state.last_message]

    def test_speech_input_failing_to_start_runs_message_only(self):
        navigator = VoiceNavigator(FakeSpeechOutput(), FakeSpeechInput(fail_on_start=True))

        state = navigator.start(STEPS)

        assert state.active is True
        assert state.hands_free is False
        assert HANDS_FREE_UNSUPPORTED_MESSAGE in state.last_message

    def test_restart_resets_cursor(self):
        navigator = started()
        navigator.handle_command("next")
        navigator.handle_command("pause")

        state = navigator.start(["Only step"])

        assert state.step_index == 0
        assert state.paused is False
        assert navigator.steps == ("Only step",)


class TestNavigation:
    """Moving the step cursor."""

    def test_next_advances_by_one(self):
        navigator = started()

        result = navigator.handle_command("Next")

        assert result.outcome == CommandOutcome.ADVANCED
        assert result.state.step_index == 1
        assert result.state.active is True
        assert result.message == "Step 2: Fry the onion"
        assert navigator.speech_output.spoken[-1] == "Step 2: Fry the onion"

    def test_next_on_last_step_finishes(self):
        navigator = started(["One", "Two"])
        navigator.handle_command("next")
        speech_input = navigator.speech_input

        result = navigator.handle_command("next")

        assert result.outcome == CommandOutcome.FINISHED
        assert result.session_ended is True
        assert result.message == COMPLETION_MESSAGE
        assert result.state.active is False
        assert navigator.speech_output.spoken[-1] == COMPLETION_MESSAGE
        assert navigator.speech_output.current == COMPLETION_MESSAGE
        assert speech_input.is_listening is False

    def test_back_on_first_step(self):
        navigator = started()

        result = navigator.handle_command("back")

        assert result.outcome == CommandOutcome.OUT_OF_RANGE
        assert result.state.step_index == 0
        assert result.message == FIRST_STEP_MESSAGE

    def test_back_decrements(self):
        navigator = started()
        navigator.handle_command("next")
        navigator.handle_command("next")

        result = navigator.handle_command("previous step")

        assert result.outcome == CommandOutcome.WENT_BACK
        assert result.state.step_index == 1
        assert result.message == "Step 2: Fry the onion"

    def test_repeat(self):
        navigator = started()

        result = navigator.handle_command("can you repeat")

        assert result.outcome == CommandOutcome.REPEATED
        assert result.message == "Repeating Step 1: Chop the onion"
        assert result.state.step_index == 0

    def test_go_to_step_in_range(self):
        navigator = started()

        result = navigator.handle_command("go to step 3")

        assert result.outcome == CommandOutcome.JUMPED
        assert result.state.step_index == 2
        assert result.message == "Okay, moving to step 3: Add the tomatoes"

    @pytest.mark.parametrize("number", [0, 6, 9])
    def test_go_to_step_out_of_range(self, number):
        navigator = started()
        navigator.handle_command("next")

        result = navigator.handle_command(f"go to step {number}")

        assert result.outcome == CommandOutcome.OUT_OF_RANGE
        assert result.state.step_index == 1
        assert result.message == f"Sorry, I can't find step number {number}."

    def test_unrecognized_is_ignored(self):
        navigator = started()
        spoken_before = list(navigator.speech_output.spoken)
        message_before = navigator.state.last_message

        result = navigator.handle_command("what's for dinner")

        assert result.outcome == CommandOutcome.IGNORED
        assert result.message is None
        assert navigator.state.last_message == message_before
        assert navigator.speech_output.spoken == spoken_before

    def test_commands_ignored_when_stopped(self):
        navigator = VoiceNavigator(FakeSpeechOutput())

        result = navigator.handle_command("next")

        assert result.outcome == CommandOutcome.IGNORED
        assert navigator.speech_output.spoken == []

    def test_round_trip_sequence(self):
        navigator = started(["One", "Two", "Three", "Four"])

        for command in ("next", "next", "back"):
            navigator.handle_command(command)
        result = navigator.handle_command("repeat")

        assert result.state.step_index == 1
        assert result.message == "Repeating Step 2: Two"

    def test_cursor_stays_in_bounds(self):
        navigator = started(["One", "Two", "Three"])
        commands = ["back", "next", "go to step 3", "next", "back", "go to step 42", "repeat"]

        for command in commands:
            state = navigator.handle_command(command).state
            if state.active:
                assert 0 <= state.step_index < 3


class TestPauseResume:
    """Pausing suspends speech and suppresses commands."""

    def test_pause_suspends_output(self):
        navigator = started()
        spoken_before = list(navigator.speech_output.spoken)

        result = navigator.handle_command("pause")

        assert result.outcome == CommandOutcome.PAUSED
        assert result.state.paused is True
        assert result.state.status == NavigatorStatus.PAUSED
        assert result.message == PAUSED_MESSAGE
        assert navigator.speech_output.pause_calls == 1
        # The paused utterance is kept, not replaced
        assert navigator.speech_output.spoken == spoken_before
        assert navigator.speech_output.current == spoken_before[-1]

    @pytest.mark.parametrize("command", ["next", "back", "repeat", "stop", "go to step 2"])
    def test_commands_suppressed_while_paused(self, command):
        navigator = started()
        navigator.handle_command("next")
        navigator.handle_command("pause")
        before = navigator.state

        result = navigator.handle_command(command)

        assert result.outcome == CommandOutcome.SUPPRESSED
        assert result.message is None
        assert navigator.state == before

    def test_resume_keeps_cursor(self):
        navigator = started()
        navigator.handle_command("next")
        navigator.handle_command("pause")

        result = navigator.handle_command("resume")

        assert result.outcome == CommandOutcome.RESUMED
        assert result.state.paused is False
        assert result.state.step_index == 1
        assert result.message == "Resuming step 2."
        assert navigator.speech_output.resume_calls == 1

    def test_resume_with_next_keyword_stays_paused(self):
        navigator = started()
        navigator.handle_command("pause")

        result = navigator.handle_command("resume next")

        assert result.command == Command.NEXT
        assert navigator.state.step_index == 1
        assert navigator.state.paused is True


class TestStop:
    """Ending the session."""

    def test_stop_command_says_goodbye(self):
        navigator = started()
        speech_input = navigator.speech_input

        result = navigator.handle_command("exit")

        assert result.outcome == CommandOutcome.STOPPED
        assert result.message == FAREWELL_MESSAGE
        assert result.state.active is False
        assert navigator.speech_output.spoken[-1] == FAREWELL_MESSAGE
        assert speech_input.stop_calls == 1

    def test_stop_resets_state(self):
        navigator = started()
        navigator.handle_command("pause")

        navigator.stop()

        state = navigator.state
        assert state.active is False
        assert state.paused is False
        assert state.last_message == ""
        assert navigator.current_step is None

    def test_stop_is_idempotent(self):
        navigator = started()
        navigator.stop()
        first = navigator.state
        cancels = navigator.speech_output.cancel_calls
        stops = navigator.speech_input.stop_calls

        navigator.stop()

        assert navigator.state == first
        assert navigator.speech_output.cancel_calls == cancels
        assert navigator.speech_input.stop_calls == stops


class TestRecognitionErrors:
    """Recognizer faults become status messages."""

    @pytest.mark.parametrize("kind", ["no-speech", "audio-capture"])
    def test_expected_errors_are_suppressed(self, kind):
        navigator = started()
        message_before = navigator.state.last_message

        assert navigator.report_recognition_error(kind) is None
        assert navigator.state.last_message == message_before

    def test_other_errors_are_reported(self):
        navigator = started()
        spoken_before = list(navigator.speech_output.spoken)

        message = navigator.report_recognition_error("network")

        assert message == "Speech recognition error: network."
        assert navigator.state.last_message == message
        assert navigator.state.active is True
        assert navigator.speech_output.spoken == spoken_before

    def test_errors_ignored_when_stopped(self):
        navigator = VoiceNavigator(FakeSpeechOutput())

        assert navigator.report_recognition_error("network") is None


class TestSubscribe:
    """Observers see every state change."""

    def test_listener_receives_copies(self):
        navigator = VoiceNavigator(FakeSpeechOutput())
        seen = []
        navigator.subscribe(seen.append)

        navigator.start(STEPS)
        navigator.handle_command("next")
        navigator.stop()

        assert [s.step_index for s in seen] == [0, 1, 0]
        assert seen[-1].active is False
        seen[0].step_index = 99
        assert navigator.state.step_index == 0

    def test_unsubscribe(self):
        navigator = VoiceNavigator(FakeSpeechOutput())
        seen = []
        unsubscribe = navigator.subscribe(seen.append)

        unsubscribe()
        navigator.start(STEPS)

        assert seen == []
