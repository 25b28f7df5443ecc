import curses
import random

from termage.clock import Clock
from termage.controller import Controller
from termage.engine import Engine
from termage.entity import Solidity
from termage.flappy_bird import (
    BIRD_START_Y,
    BIRD_X,
    FLAP_HEIGHT,
    PIPE_GAP,
    PIPE_SPAWN_DELAY,
    PIPE_WIDTH,
    FlappyAction,
    FlappyBirdGame,
)
from termage.input_event import KeyboardInput, NoInput
from termage.position import Position
from termage.shape import Shape
from termage.sound import SoundSystem


class ScriptedController(Controller):
    def __init__(self, inputs):
        self._inputs = list(inputs)

    def get_input(self):
        return self._inputs.pop(0) if self._inputs else KeyboardInput(ord("q"))


class RecordingSound(SoundSystem):
    def __init__(self):
        super().__init__()
        self.played = []

    def play(self, sound_id):
        self.played.append(sound_id)

    def stop_all(self):
        pass


def make_game(inputs):
    engine = Engine(clock=Clock(sleep=lambda _s: None))
    sound = RecordingSound()
    engine.set_sound_system(sound)
    engine.controller = ScriptedController(inputs)
    game = FlappyBirdGame(rng=random.Random(7))
    game.setup(engine)
    return game, engine, sound


def test_translate_input():
    game = FlappyBirdGame()
    assert game.translate_input(KeyboardInput(ord(" "))) is FlappyAction.FLAP
    assert game.translate_input(KeyboardInput(ord("W"))) is FlappyAction.FLAP
    assert game.translate_input(KeyboardInput(curses.KEY_UP)) is FlappyAction.FLAP
    assert game.translate_input(KeyboardInput(ord("x"))) is FlappyAction.NONE
    assert game.translate_input(NoInput()) is FlappyAction.NONE


def test_initial_status_lines():
    game = FlappyBirdGame()
    assert game.status_lines() == [
        "FLAPPY BIRD | Score: 0",
        "Press SPACE or UP to flap",
        "Press 'q' to quit | 'm' to toggle mute",
    ]


def test_setup_creates_player_bird():
    game, engine, _ = make_game([])
    bird = engine.world.player
    assert bird is game.bird
    assert bird.tag == "bird"
    assert bird.position == Position(BIRD_X, BIRD_START_Y)
    assert engine.world.find_entities_by_tag("bird") == [bird]
    assert engine.world.collect_status_lines() == game.status_lines()


def test_flap_moves_bird_up_and_plays_sound():
    game, engine, sound = make_game([KeyboardInput(ord(" "))])
    engine.run()
    assert game.bird.position.y == BIRD_START_Y - FLAP_HEIGHT
    assert sound.played == ["flap"]


def test_pipes_spawn_with_gap():
    inputs = [KeyboardInput(ord(" ")) if i % 10 == 0 else NoInput() for i in range(PIPE_SPAWN_DELAY + 5)]
    game, engine, _ = make_game(inputs)
    engine.run()
    world = engine.world
    pipes = world.find_entities_by_tag("pipe")
    triggers = world.find_entities_by_tag("score_trigger")
    assert not game.game_over
    assert len(pipes) == 2
    assert len(triggers) == 1
    assert sum(p.base_shape.height for p in pipes) + PIPE_GAP == world.height
    assert all(p.position.x < world.width - PIPE_WIDTH for p in pipes)


def test_score_trigger_increments_score():
    game, engine, sound = make_game([NoInput(), NoInput()])
    trigger = engine.world.create_entity(1000, "score_trigger", game.bird.position, Shape("t", ["###", "###"]))
    trigger.solidity = Solidity.TRIGGER
    engine.run()
    assert game.score == 1
    assert not trigger.alive
    assert "score" in sound.played
    assert engine.world.collect_status_lines() == game.status_lines()
    assert game.status_lines()[0].endswith(str(game.score))


def test_pipe_collision_ends_game():
    game, engine, sound = make_game([NoInput()] * 3)
    engine.world.create_entity(1000, "pipe", game.bird.position, Shape("p", ["###", "###"]))
    engine.run()
    assert game.game_over
    assert engine.game_over
    assert not engine.won
    assert sound.played.count("die") == 1
    assert engine.world.collect_status_lines()[0] == "=== GAME OVER ==="


def test_falling_to_the_ground_ends_game():
    game, engine, _ = make_game([NoInput()] * 10)
    game.bird.set_position(BIRD_X, engine.world.height - game.bird.hitbox.height)
    engine.run()
    assert game.game_over
    assert engine.game_over
    assert game.status_lines()[1] == "Final Score: 0"