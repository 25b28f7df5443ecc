import curses
import random

from termage.clock import Clock
from termage.controller import Controller
from termage.engine import Engine
from termage.entity import Solidity
from termage.input_event import KeyboardInput, NoInput
from termage.shape import Shape
from termage.sound import SoundSystem
from termage.space_invaders import (
    ENEMY_POINTS,
    LEVELS,
    PLAYER_SPEED,
    PLAYER_X,
    SpaceAction,
    SpaceInvadersGame,
)


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
    game = SpaceInvadersGame(rng=random.Random(3))
    game.setup(engine)
    return game, engine, sound


def run_again(engine, inputs):
    engine.quit = False
    engine.controller = ScriptedController(inputs)
    engine.run()


def destroy_all_enemies(engine):
    world = engine.world
    for offset, enemy in enumerate(world.find_entities_by_tag("enemy")):
        probe = world.create_entity(50_000 + offset, "player_bullet", enemy.position, enemy.base_shape)
        probe.solidity = Solidity.TRIGGER


def test_translate_input():
    game = SpaceInvadersGame()
    assert game.translate_input(KeyboardInput(ord("w"))) is SpaceAction.MOVE_UP
    assert game.translate_input(KeyboardInput(curses.KEY_UP)) is SpaceAction.MOVE_UP
    assert game.translate_input(KeyboardInput(ord("S"))) is SpaceAction.MOVE_DOWN
    assert game.translate_input(KeyboardInput(curses.KEY_DOWN)) is SpaceAction.MOVE_DOWN
    assert game.translate_input(KeyboardInput(ord(" "))) is SpaceAction.SHOOT
    assert game.translate_input(KeyboardInput(ord("x"))) is SpaceAction.NONE
    assert game.translate_input(NoInput()) is SpaceAction.NONE


def test_setup_builds_first_level():
    game, engine, _ = make_game([])
    world = engine.world
    config = LEVELS[0]
    assert game.level == 1
    assert world.player is game.player
    assert game.player.position.x == PLAYER_X
    assert len(world.find_entities_by_tag("enemy")) == config.enemy_rows * config.enemy_cols
    assert game.enemies_remaining == config.enemy_rows * config.enemy_cols
    assert len(world.find_entities_by_tag("star")) == 8
    lines = game.status_lines()
    assert lines[0].startswith("SPACE INVADERS | Level: 1")
    assert lines[1] == "W/S or UP/DOWN to move | SPACE to shoot"
    assert world.collect_status_lines() == lines


def test_move_up():
    game, engine, _ = make_game([KeyboardInput(ord("w"))])
    start_y = game.player.position.y
    engine.run()
    assert game.player.position.y == start_y - PLAYER_SPEED


def test_shooting_respects_cooldown():
    game, engine, sound = make_game([KeyboardInput(ord(" ")), KeyboardInput(ord(" "))])
    engine.run()
    assert len(engine.world.find_entities_by_tag("player_bullet")) == 1
    assert sound.played.count("shoot") == 1


def test_bullet_destroys_enemy():
    game, engine, sound = make_game([NoInput()])
    enemy = engine.world.find_entities_by_tag("enemy")[0]
    before = game.enemies_remaining
    probe = engine.world.create_entity(50_000, "player_bullet", enemy.position, enemy.base_shape)
    probe.solidity = Solidity.TRIGGER
    engine.run()
    assert not enemy.alive
    assert not probe.alive
    assert game.score == ENEMY_POINTS
    assert game.enemies_remaining == before - 1
    assert "hit" in sound.played


def test_enemy_bullet_hitting_player_ends_game():
    game, engine, sound = make_game([NoInput()] * 3)
    bullet = engine.world.create_entity(50_000, "enemy_bullet", game.player.position, Shape("b", ["####"] * 3))
    bullet.solidity = Solidity.TRIGGER
    engine.run()
    assert game.game_over
    assert engine.game_over
    assert not engine.won
    assert sound.played.count("die") == 1
    assert game.status_lines()[0] == "=== GAME OVER ==="
    assert engine.world.collect_status_lines() == game.status_lines()


def test_enemy_reaching_player_zone_ends_game():
    game, engine, sound = make_game([NoInput()] * 2)
    enemy = engine.world.find_entities_by_tag("enemy")[0]
    enemy.set_position(PLAYER_X, 0)
    engine.run()
    assert game.game_over
    assert engine.game_over
    assert "die" in sound.played


def test_clearing_level_advances_then_wins():
    game, engine, sound = make_game([])
    destroy_all_enemies(engine)
    run_again(engine, [NoInput(), NoInput()])
    second = LEVELS[1]
    assert game.level == 2
    assert game.enemies_remaining == second.enemy_rows * second.enemy_cols
    assert sound.played.count("win") == 1

    destroy_all_enemies(engine)
    run_again(engine, [NoInput(), NoInput(), NoInput()])
    assert game.victory
    assert engine.won
    assert engine.game_over
    assert sound.played.count("win") == 2
    assert game.status_lines()[0] == "=== VICTORY! ==="