"""Scoring, death, and the endgame question pool."""

from ..logging import get_logger
from . import tables
from .state import GameState, Mode, Pending
from .world import World

logger = get_logger(__name__)


def regular_score(world: World, state: GameState) -> int:
    """Points for treasures in the regular treasure room; urine there voids them."""
    contents = state.room_contents.get(tables.TREASURE_ROOM, [])
    if tables.URINE in contents:
        return 0
    return sum(world.items[obj].points for obj in contents if obj in world.items)


def endgame_score(world: World, state: GameState) -> int:
    contents = state.room_contents.get(tables.ENDGAME_TREASURE_ROOM, [])
    return sum(world.items[obj].points for obj in contents if obj in world.items)


def current_score(world: World, state: GameState) -> int:
    if state.in_endgame:
        return endgame_score(world, state)
    return regular_score(world, state)


def score_text(world: World, state: GameState) -> str:
    """Render the score line for whichever game is in progress."""
    if not state.in_endgame:
        return (
            f"You have scored {regular_score(world, state)} out of a possible "
            f"{tables.REGULAR_MAX_SCORE} points."
        )
    score = endgame_score(world, state)
    text = (
        f"You have scored {score} endgame points out of a possible "
        f"{tables.ENDGAME_MAX_SCORE}."
    )
    if score == tables.ENDGAME_MAX_SCORE:
        text += (
            "\n\nCongratulations.  You have won.  The wizard password is "
            f"'{tables.WIZARD_PASSWORD}'"
        )
    return text


def die(world: World, state: GameState, message: str) -> str:
    """Kill the player; the session only accepts restore or restart afterwards."""
    state.dead = True
    state.in_bus = False
    state.mode = Mode.DUNGEON
    state.pending = Pending.NONE
    logger.info(
        "player_died",
        room=state.current_room,
        score=current_score(world, state),
        commands=state.command_count,
    )
    lines = [message] if message else []
    lines.append("You are dead.")
    lines.append(score_text(world, state))
    return "\n".join(lines)


def draw_question(world: World, state: GameState) -> str:
    """Pick an unused question at random and make it the pending one."""
    if not state.question_pool:
        question, answers = tables.FALLBACK_QUESTION
    else:
        index = state.question_pool.pop(state.rng.randrange(len(state.question_pool)))
        question, answers = world.questions[index]
        if index == tables.FTP_QUESTION and state.ftp_password:
            answers = (state.ftp_password,)
    state.pending_question = question
    state.pending_answers = answers
    return question


def question_text(world: World, state: GameState) -> str:
    """The question-room step: repeat the open question or draw a new one."""
    if state.pending_question is None:
        draw_question(world, state)
    return f"Your question is:\n{state.pending_question}"


def check_answer(state: GameState, answer: str) -> bool:
    """Check an answer against the open question, clearing it when right."""
    if answer not in state.pending_answers:
        return False
    state.pending_question = None
    state.pending_answers = ()
    return True


def start_endgame(world: World, state: GameState) -> None:
    """Begin the endgame in the treasure room with the bill waiting at the end."""
    state.in_endgame = True
    state.mode = Mode.DUNGEON
    state.pending = Pending.NONE
    state.current_room = tables.TREASURE_ROOM
    state.room_contents[tables.ENDGAME_TREASURE_ROOM] = [tables.BILL]
    logger.info("endgame_started", commands=state.command_count)
