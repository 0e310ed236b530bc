"""
Voice Navigator - hands-free step navigation for guided cooking.

Turns recognized speech into step-cursor moves and spoken feedback.
This service is pure Python with no Streamlit dependencies, and it never
touches a speech library directly: speech I/O goes through the
SpeechInput/SpeechOutput interfaces.

Commands are matched by keyword containment on the lower-cased
transcript, checked in this order (first match wins):

    next, repeat, back/previous, pause, resume, "go to step N", stop/exit

Anything else is ignored, so background chatter never disturbs a session.
While paused, everything except "resume" is ignored.
"""

import logging
import re
from typing import Callable, Optional, Sequence

from models.navigator import (
    Command,
    CommandOutcome,
    CommandResult,
    NavigatorState,
)
from services.speech.base import SpeechInput, SpeechOutput

logger = logging.getLogger(__name__)

GO_TO_STEP_PATTERN = re.compile(r"go to step (\d+)")

# Expected during continuous listening, never shown to the user
SUPPRESSED_RECOGNITION_ERRORS = frozenset({"no-speech", "audio-capture"})

COMPLETION_MESSAGE = "You've completed all the steps! Well done."
FAREWELL_MESSAGE = "Stopping the cooking assistant. Goodbye!"
FIRST_STEP_MESSAGE = "You are already on the first step."
PAUSED_MESSAGE = "Paused. Say 'resume' to continue."
HANDS_FREE_UNSUPPORTED_MESSAGE = (
    "Hands-free voice input isn't supported here, "
    "so use the buttons to move between steps."
)

StateListener = Callable[[NavigatorState], None]


def classify_command(transcript: str) -> tuple[Command, Optional[int]]:
    """
    Classify a normalized transcript.

    Returns:
        (command, step number) - the step number is only set for GO_TO_STEP
    """
    if "next" in transcript:
        return Command.NEXT, None
    if "repeat" in transcript:
        return Command.REPEAT, None
    if "back" in transcript or "previous" in transcript:
        return Command.BACK, None
    if "pause" in transcript:
        return Command.PAUSE, None
    if "resume" in transcript:
        return Command.RESUME, None
    match = GO_TO_STEP_PATTERN.search(transcript)
    if match:
        return Command.GO_TO_STEP, int(match.group(1))
    if "stop" in transcript or "exit" in transcript:
        return Command.STOP, None
    return Command.NONE, None


class VoiceNavigator:
    """
    Step cursor for one guided cooking session at a time.

    Not thread-safe: callers must hand it one transcript at a time
    (VoiceSession does this with a single-consumer queue).

    Attributes:
        speech_output: Where spoken feedback goes
        speech_input: Speech-to-text stream, or None when the host has none
    """

    def __init__(self, speech_output: SpeechOutput, speech_input: Optional[SpeechInput] = None):
        self.speech_output = speech_output
        self.speech_input = speech_input
        self._steps: tuple[str, ...] = ()
        self._title: Optional[str] = None
        self._state = NavigatorState()
        self._listeners: list[StateListener] = []

    # Read access
    @property
    def state(self) -> NavigatorState:
        """A copy of the current state."""
        return self._state.copy()

    @property
    def steps(self) -> tuple[str, ...]:
        return self._steps

    @property
    def title(self) -> Optional[str]:
        return self._title

    @property
    def current_step(self) -> Optional[str]:
        if not self._state.active:
            return None
        return self._steps[self._state.step_index]

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Call listener with a state copy after every change.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Lifecycle
    def start(self, recipe_steps: Sequence[str], title: Optional[str] = None) -> NavigatorState:
        """
        Start guided cooking at step 1.

        Speaks an introduction naming the first step and starts listening.
        If there's no speech input (or it fails to start) the session still
        runs, in message-only mode, and the introduction says so.

        Raises:
            ValueError: if recipe_steps is empty
        """
        if not recipe_steps:
            raise ValueError("A recipe needs at least one step to cook hands-free")

        if self._state.active:
            self.stop()

        self._steps = tuple(recipe_steps)
        self._title = title
        self._state = NavigatorState(step_index=0, active=True, paused=False)

        cooking = f"Let's start cooking {title}." if title else "Let's start cooking."
        intro = f"{cooking} Step 1: {self._steps[0]}. Say 'Next' when you're ready."

        hands_free = self._start_listening()
        self._state.hands_free = hands_free
        if not hands_free:
            intro = f"{intro} {HANDS_FREE_UNSUPPORTED_MESSAGE}"

        logger.info(f"Guided cooking started ({len(self._steps)} steps, hands-free={hands_free})")
        self._announce(intro)
        return self.state

    def stop(self) -> None:
        """End the session. Does nothing if no session is running."""
        if not self._state.active:
            return

        self._state = NavigatorState()
        self._steps = ()
        self._title = None
        self.speech_output.cancel_all()
        if self.speech_input is not None:
            self.speech_input.stop()

        logger.info("Guided cooking stopped")
        self._notify()

    # Commands
    def handle_command(self, raw_transcript: str) -> CommandResult:
        """
        Interpret one transcript.

        Returns:
            The command recognized, what it did, the new state and the
            message produced (None when nothing was said)
        """
        transcript = (raw_transcript or "").strip().lower()

        if not self._state.active:
            return self._result(Command.NONE, CommandOutcome.IGNORED)

        if self._state.paused and "resume" not in transcript:
            return self._result(Command.NONE, CommandOutcome.SUPPRESSED)

        command, step_number = classify_command(transcript)
        logger.debug(f"Transcript {transcript!r} -> {command.value}")

        if command == Command.NEXT:
            return self._next()
        if command == Command.REPEAT:
            return self._repeat()
        if command == Command.BACK:
            return self._back()
        if command == Command.PAUSE:
            return self._pause()
        if command == Command.RESUME:
            return self._resume()
        if command == Command.GO_TO_STEP:
            return self._go_to(step_number)
        if command == Command.STOP:
            return self._finish(Command.STOP, CommandOutcome.STOPPED, FAREWELL_MESSAGE)
        return self._result(Command.NONE, CommandOutcome.IGNORED)

    def report_recognition_error(self, kind: str) -> Optional[str]:
        """
        Surface a speech recognition error as a status message.

        No-speech and audio-capture errors are expected while listening
        continuously and are dropped. Nothing here stops the session.

        Returns:
            The status message shown, or None if the error was suppressed
        """
        if not self._state.active or kind in SUPPRESSED_RECOGNITION_ERRORS:
            return None

        logger.warning(f"Speech recognition error: {kind}")
        message = f"Speech recognition error: {kind}."
        self._state.last_message = message
        self._notify()
        return message

    def _next(self) -> CommandResult:
        next_index = self._state.step_index + 1
        if next_index >= len(self._steps):
            return self._finish(Command.NEXT, CommandOutcome.FINISHED, COMPLETION_MESSAGE)

        self._state.step_index = next_index
        message = f"Step {next_index + 1}: {self._steps[next_index]}"
        return self._say(Command.NEXT, CommandOutcome.ADVANCED, message)

    def _repeat(self) -> CommandResult:
        index = self._state.step_index
        message = f"Repeating Step {index + 1}: {self._steps[index]}"
        return self._say(Command.REPEAT, CommandOutcome.REPEATED, message)

    def _back(self) -> CommandResult:
        previous_index = self._state.step_index - 1
        if previous_index < 0:
            return self._say(Command.BACK, CommandOutcome.OUT_OF_RANGE, FIRST_STEP_MESSAGE)

        self._state.step_index = previous_index
        message = f"Step {previous_index + 1}: {self._steps[previous_index]}"
        return self._say(Command.BACK, CommandOutcome.WENT_BACK, message)

    def _pause(self) -> CommandResult:
        # Shown, not spoken: speaking would replace the utterance being paused
        self.speech_output.pause()
        self._state.paused = True
        return self._show(Command.PAUSE, CommandOutcome.PAUSED, PAUSED_MESSAGE)

    def _resume(self) -> CommandResult:
        self.speech_output.resume()
        self._state.paused = False
        message = f"Resuming step {self._state.step_index + 1}."
        return self._show(Command.RESUME, CommandOutcome.RESUMED, message)

    def _go_to(self, step_number: int) -> CommandResult:
        target = step_number - 1
        if not 0 <= target < len(self._steps):
            message = f"Sorry, I can't find step number {step_number}."
            return self._say(Command.GO_TO_STEP, CommandOutcome.OUT_OF_RANGE, message)

        self._state.step_index = target
        message = f"Okay, moving to step {step_number}: {self._steps[target]}"
        return self._say(Command.GO_TO_STEP, CommandOutcome.JUMPED, message)

    def _finish(self, command: Command, outcome: CommandOutcome, message: str) -> CommandResult:
        # Tear down first so cancelling synthesis doesn't cut off the goodbye
        self.stop()
        self.speech_output.speak(message)
        return self._result(command, outcome, message)

    # Output helpers
    def _start_listening(self) -> bool:
        if self.speech_input is None:
            return False
        try:
            self.speech_input.start_continuous()
        except OSError as e:
            logger.warning(f"Speech input failed to start: {e}")
            return False
        return True

    def _announce(self, message: str) -> None:
        self._state.last_message = message
        self.speech_output.speak(message)
        self._notify()

    def _say(self, command: Command, outcome: CommandOutcome, message: str) -> CommandResult:
        self._announce(message)
        return self._result(command, outcome, message)

    def _show(self, command: Command, outcome: CommandOutcome, message: str) -> CommandResult:
        self._state.last_message = message
        self._notify()
        return self._result(command, outcome, message)

    def _result(
        self,
        command: Command,
        outcome: CommandOutcome,
        message: Optional[str] = None
    ) -> CommandResult:
        return CommandResult(command=command, outcome=outcome, state=self.state, message=message)

    def _notify(self) -> None:
        snapshot = self.state
        for listener in list(self._listeners):
            listener(snapshot)
