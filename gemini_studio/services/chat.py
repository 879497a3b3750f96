"""Conversational session - owns a linear turn history."""

from enum import Enum

from ..clients.gemini import GeminiClient
from ..errors import EmptyResponseError, GenerationError, SessionNotStartedError, SessionStateError
from ..models.chat import ChatTurn, Role


class SessionState(str, Enum):
    CREATED = "created"
    ACTIVE = "active"
    DISCARDED = "discarded"


class ChatSession:
    """
    A chat owned by its caller.

    Lifecycle: CREATED -> start() -> ACTIVE -> discard() -> DISCARDED.
    Only one send() may be in flight at a time; callers serialize.
    """

    def __init__(
        self,
        client: GeminiClient,
        system_instruction: str,
        greeting: str | None = None,
        replay_greeting: bool = False,
        empty_reply: str = "I'm sorry, I couldn't generate a response.",
    ):
        self.client = client
        self.system_instruction = system_instruction
        self.greeting = greeting
        self.replay_greeting = replay_greeting
        self.empty_reply = empty_reply
        self.state = SessionState.CREATED
        self._history: list[ChatTurn] = []
        self._greeting_turn: ChatTurn | None = None

    @property
    def turns(self) -> tuple[ChatTurn, ...]:
        """All turns in order, including the greeting if one was shown."""
        if self._greeting_turn:
            return (self._greeting_turn, *self._history)
        return tuple(self._history)

    def start(self, seed: str | None = None) -> "ChatSession":
        """Activate the session, optionally appending seed context to the persona."""
        if self.state is not SessionState.CREATED:
            raise SessionStateError(f"Cannot start a session that is {self.state.value}")
        if seed:
            self.system_instruction = f"{self.system_instruction}\n\n{seed}"
        if self.greeting:
            self._greeting_turn = ChatTurn(role=Role.MODEL, text=self.greeting)
        self.state = SessionState.ACTIVE
        return self

    def send(self, text: str) -> str:
        """
        Append a user turn, forward the history, append and return the reply.

        On failure the user turn is removed and the error propagates.
        """
        if self.state is SessionState.CREATED:
            raise SessionNotStartedError("Chat session not initialized. Call start() first.")
        if self.state is not SessionState.ACTIVE:
            raise SessionStateError(f"Cannot send on a session that is {self.state.value}")

        prior = list(self._history)
        if self._greeting_turn and self.replay_greeting:
            prior.insert(0, self._greeting_turn)
        self._history.append(ChatTurn(role=Role.USER, text=text))

        try:
            reply = self.client.chat(prior, text, system_instruction=self.system_instruction)
        except EmptyResponseError:
            reply = self.empty_reply
        except GenerationError:
            self._history.pop()
            raise

        self._history.append(ChatTurn(role=Role.MODEL, text=reply))
        return reply

    def discard(self) -> None:
        self.state = SessionState.DISCARDED
