"""Game state machine — turns, movement, ladders/snakes and the win check."""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import Protocol

from snakes_ladders.board import DEFAULT_LAYOUT, BoardLayout
from snakes_ladders.dice import DICE_SIDES, DiceSource, RandomDice

logger = logging.getLogger("snakes_ladders.game")

PLAYER_COLORS = ("#e87a41", "#22b8cf")
DEFAULT_PLAYERS: tuple[tuple[str, str], ...] = (
    ("Player 1", PLAYER_COLORS[0]),
    ("Player 2", PLAYER_COLORS[1]),
)
PLAYER_COUNT = 2
START_SQUARE = 1

WELCOME_MESSAGE = "Welcome to Snakes and Ladders Adventure!"
RESET_MESSAGE = "Game reset. Good luck!"


# ── Structured types ────────────────────────────────────────────────

class GameStatus(str, enum.Enum):
    PLAYING = "playing"
    ENDED = "ended"


@dataclass(frozen=True)
class Player:
    name: str
    color: str
    position: int = START_SQUARE


@dataclass(frozen=True)
class RollRecord:
    """What happened on one applied roll."""

    turn_number: int
    player_index: int
    roll: int
    start: int
    landed: int | None  # square the dice reached; None when blocked
    end: int
    via: str | None = None  # "ladder" | "snake"
    blocked: bool = False
    won: bool = False


@dataclass
class GameSession:
    """Mutable state of one game. Owned by :class:`Game`; read it through
    the game's accessors or a :class:`GameSnapshot`."""

    players: list[Player]
    turn_index: int = 0
    last_dice_value: int | None = None
    status: GameStatus = GameStatus.PLAYING
    winner_index: int | None = None
    message: str = WELCOME_MESSAGE
    history: list[RollRecord] = field(default_factory=list)


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable copy of a session at one point in time."""

    players: tuple[Player, ...]
    turn_index: int
    last_dice_value: int | None
    status: GameStatus
    winner_index: int | None
    message: str
    history: tuple[RollRecord, ...] = ()

    @property
    def is_over(self) -> bool:
        return self.status is GameStatus.ENDED

    @property
    def current_player(self) -> Player:
        return self.players[self.turn_index]

    @property
    def winner(self) -> Player | None:
        if self.winner_index is None:
            return None
        return self.players[self.winner_index]


def new_session(
    roster: Sequence[tuple[str, str]] = DEFAULT_PLAYERS,
    message: str = WELCOME_MESSAGE,
) -> GameSession:
    """A fresh session: everyone on the start square, first player to move."""
    return GameSession(
        players=[Player(name=name, color=color) for name, color in roster],
        message=message,
    )


# ── Observer ────────────────────────────────────────────────────────

class GameObserver(Protocol):
    """Receives a record for every roll the game applies."""

    def on_roll(self, record: RollRecord) -> None: ...


@dataclass
class ListObserver:
    """Default observer — collects records into a list."""

    records: list[RollRecord] = field(default_factory=list)

    def on_roll(self, record: RollRecord) -> None:
        self.records.append(record)


# ── Game ─────────────────────────────────────────────────────────────

class Game:
    """Two-player Snakes & Ladders.

    All state changes go through :meth:`roll_dice` and :meth:`reset`; both
    return a :class:`GameSnapshot` of the resulting state. The dice source
    is injected so tests can script the rolls.
    """

    def __init__(
        self,
        layout: BoardLayout = DEFAULT_LAYOUT,
        dice: DiceSource | None = None,
        players: Sequence[tuple[str, str]] = DEFAULT_PLAYERS,
        observer: GameObserver | None = None,
        session: GameSession | None = None,
    ):
        self.layout = layout
        self.dice = dice or RandomDice()
        self.observer = observer or ListObserver()
        if session is not None:
            players = [(p.name, p.color) for p in session.players]
        self._roster = _check_roster(players)
        if session is None:
            session = new_session(self._roster)
        else:
            # Own copy; later changes to the caller's session do not leak in
            session = replace(
                session, players=list(session.players), history=list(session.history),
            )
        self._session = session
        self._check_session()

    def _check_session(self) -> None:
        s = self._session
        last = self.layout.square_count
        for p in s.players:
            if not START_SQUARE <= p.position <= last:
                raise ValueError(f"{p.name} is off the board at square {p.position}.")
        if not 0 <= s.turn_index < len(s.players):
            raise ValueError(f"Turn index {s.turn_index} is out of range.")
        if s.status is GameStatus.PLAYING and s.winner_index is not None:
            raise ValueError("A game in progress cannot have a winner.")
        if s.status is GameStatus.ENDED and (
            s.winner_index is None or s.players[s.winner_index].position != last
        ):
            raise ValueError("An ended game needs a winner on the final square.")

    # ── Read accessors ──

    @property
    def players(self) -> tuple[Player, ...]:
        return tuple(self._session.players)

    @property
    def turn_index(self) -> int:
        return self._session.turn_index

    @property
    def current_player(self) -> Player:
        return self._session.players[self._session.turn_index]

    @property
    def last_dice_value(self) -> int | None:
        return self._session.last_dice_value

    @property
    def status(self) -> GameStatus:
        return self._session.status

    @property
    def is_over(self) -> bool:
        return self._session.status is GameStatus.ENDED

    @property
    def winner_index(self) -> int | None:
        return self._session.winner_index

    @property
    def winner(self) -> Player | None:
        idx = self._session.winner_index
        return None if idx is None else self._session.players[idx]

    @property
    def message(self) -> str:
        return self._session.message

    @property
    def history(self) -> tuple[RollRecord, ...]:
        return tuple(self._session.history)

    def snapshot(self) -> GameSnapshot:
        s = self._session
        return GameSnapshot(
            players=tuple(s.players),
            turn_index=s.turn_index,
            last_dice_value=s.last_dice_value,
            status=s.status,
            winner_index=s.winner_index,
            message=s.message,
            history=tuple(s.history),
        )

    # ── Commands ──

    def roll_dice(self) -> GameSnapshot:
        """Roll for the player whose turn it is and apply the rules.

        Ignored once the game has ended.
        """
        s = self._session
        if s.status is GameStatus.ENDED:
            logger.debug("Roll ignored: game already won by player %s", s.winner_index)
            return self.snapshot()

        roll = self.dice.roll()
        if not 1 <= roll <= DICE_SIDES:
            raise ValueError(f"Dice produced {roll}; expected 1–{DICE_SIDES}.")

        idx = s.turn_index
        player = s.players[idx]
        start = player.position
        last = self.layout.square_count
        destination = start + roll

        msg = f"{player.name} rolled a {roll}. "
        landed: int | None = None
        via: str | None = None
        won = False

        # Overshoot → stay put
        if destination > last:
            msg += "Cannot move. Needs exact roll to finish."
        else:
            landed = position = destination
            # One hop at most; the hop's destination is not checked again
            hop = self.layout.special_dest(landed)
            if hop is not None and hop > landed:
                position = hop
                via = "ladder"
                msg += f"Ladder up from {landed} to {position}! "
            elif hop is not None:
                position = hop
                via = "snake"
                msg += f"Oh no, snake down from {landed} to {position}. "
            player = replace(player, position=position)
            s.players[idx] = player

            if position == last:
                won = True
                s.status = GameStatus.ENDED
                s.winner_index = idx
                msg += f"🎉 {player.name} WINS!"

        if not won:
            s.turn_index = (idx + 1) % len(s.players)

        s.last_dice_value = roll
        s.message = msg.rstrip()

        record = RollRecord(
            turn_number=len(s.history) + 1,
            player_index=idx,
            roll=roll,
            start=start,
            landed=landed,
            end=player.position,
            via=via,
            blocked=landed is None,
            won=won,
        )
        s.history.append(record)
        self.observer.on_roll(record)

        logger.debug(
            "%s rolled %d: %d → %d%s",
            player.name, roll, start, player.position,
            f" via {via}" if via else (" (blocked)" if landed is None else ""),
        )
        if won:
            logger.info("%s wins after %d rolls", player.name, record.turn_number)
        return self.snapshot()

    def reset(self) -> GameSnapshot:
        """Start over with the same players, everyone back on square 1."""
        self._session = new_session(self._roster, message=RESET_MESSAGE)
        logger.info("Game reset")
        return self.snapshot()


def _check_roster(players: Sequence[tuple[str, str]]) -> tuple[tuple[str, str], ...]:
    roster = tuple((name, color) for name, color in players)
    if len(roster) != PLAYER_COUNT:
        raise ValueError(f"Exactly {PLAYER_COUNT} players are required, got {len(roster)}.")
    names = [name for name, _ in roster]
    if len(set(names)) != len(names):
        raise ValueError(f"Player names must be unique: {names}.")
    return roster
