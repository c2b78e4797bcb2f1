"""Tests for formation layout and sweep movement."""

from sprite_invaders.config import GameConfig
from sprite_invaders.game.formation import Formation
from sprite_invaders.game.sprite import SpriteKind


def sweep_until_flip(formation: Formation, limit: int = 500) -> int:
    """Advance tick by tick and return the tick on which the formation flipped."""
    for tick in range(1, limit + 1):
        formation.advance()
        if formation.check_and_flip():
            return tick
    raise AssertionError("formation never flipped")


class TestFormationLayout:
    """Tests for Formation.create()."""

    def test_default_grid(self) -> None:
        """8 columns x 3 rows starting at x=100 with 30px spacing."""
        formation = Formation.create(GameConfig())

        assert len(formation.enemies) == 24
        assert [enemy.x for enemy in formation.enemies[:8]] == list(range(100, 340, 30))
        assert {enemy.y for enemy in formation.enemies[:8]} == {30}
        assert {enemy.y for enemy in formation.enemies[8:16]} == {55}
        assert {enemy.y for enemy in formation.enemies[16:]} == {80}

    def test_front_row_is_worth_most(self) -> None:
        formation = Formation.create(GameConfig())

        assert [formation.enemies[i].points for i in (0, 8, 16)] == [30, 20, 10]
        assert [formation.enemies[i].kind for i in (0, 8, 16)] == [
            SpriteKind.ENEMY_TOP,
            SpriteKind.ENEMY_MIDDLE,
            SpriteKind.ENEMY_BOTTOM,
        ]

    def test_extra_rows_reuse_the_back_row(self) -> None:
        formation = Formation.create(GameConfig(enemy_columns=2, enemy_rows=4))

        assert len(formation.enemies) == 8
        assert formation.enemies[-1].y == 105
        assert formation.enemies[-1].points == 10
        assert formation.enemies[-1].kind is SpriteKind.ENEMY_BOTTOM

    def test_starts_sweeping_right(self) -> None:
        formation = Formation.create(GameConfig())
        assert formation.direction == 1


class TestFormationMovement:
    """Tests for advance() and check_and_flip()."""

    def test_advance_moves_every_enemy_including_dead_ones(self) -> None:
        formation = Formation.create(GameConfig())
        formation.enemies[3].destroy(tick=0)
        before = [enemy.x for enemy in formation.enemies]

        formation.advance()

        assert [enemy.x for enemy in formation.enemies] == [x + 3 for x in before]

    def test_right_boundary_flip(self) -> None:
        """Rightmost front enemy starts at 310 and must pass 340, so the flip lands on tick 11."""
        formation = Formation.create(GameConfig())
        start_y = [enemy.y for enemy in formation.enemies]

        flip_tick = sweep_until_flip(formation)

        assert flip_tick == 11
        assert formation.direction == -1
        assert formation.drops == 1
        assert [enemy.y for enemy in formation.enemies] == [y + 10 for y in start_y]

    def test_no_flip_inside_the_boundaries(self) -> None:
        formation = Formation.create(GameConfig())
        start_y = [enemy.y for enemy in formation.enemies]

        for _ in range(10):
            formation.advance()
            assert not formation.check_and_flip()

        assert [enemy.y for enemy in formation.enemies] == start_y

    def test_two_crossings_restore_direction(self) -> None:
        """Left edge is crossed once the leading enemy drops below x=30, on tick 46."""
        formation = Formation.create(GameConfig())
        start_y = [enemy.y for enemy in formation.enemies]

        first = sweep_until_flip(formation)
        assert formation.direction == -1
        second = first + sweep_until_flip(formation)

        assert (first, second) == (11, 46)
        assert formation.direction == 1
        assert [enemy.y for enemy in formation.enemies] == [y + 20 for y in start_y]

    def test_boundary_uses_front_row_even_when_dead(self) -> None:
        formation = Formation.create(GameConfig())
        formation.enemies[7].destroy(tick=0)

        assert sweep_until_flip(formation) == 11


class TestInvasion:
    """Tests for has_invaded()."""

    def test_leading_enemy_below_ground_line(self) -> None:
        formation = Formation.create(GameConfig())
        formation.leading_enemy.y = 181
        assert formation.has_invaded(180)

    def test_on_the_ground_line_is_not_yet_invaded(self) -> None:
        formation = Formation.create(GameConfig())
        formation.leading_enemy.y = 180
        assert not formation.has_invaded(180)
