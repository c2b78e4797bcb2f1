"""Tests for the beam and bombs."""

from sprite_invaders.game.projectiles import ProjectileSet
from sprite_invaders.game.sprite import SpriteKind, create_bomb, create_cannon, create_enemy


def make_projectiles() -> tuple[ProjectileSet, object]:
    cannon = create_cannon(50, 250)
    return ProjectileSet(cannon, frame_height=300, beam_speed=10, bomb_speed=10), cannon


class TestBeam:
    """Tests for firing and moving the beam."""

    def test_beam_starts_inactive(self) -> None:
        projectiles, _ = make_projectiles()
        assert not projectiles.beam_active

    def test_fire_places_beam_on_cannon(self) -> None:
        projectiles, cannon = make_projectiles()

        assert projectiles.fire(cannon)

        assert projectiles.beam_active
        assert (projectiles.beam.x, projectiles.beam.y) == (57, 250)

    def test_fire_while_active_is_ignored(self) -> None:
        """Only one beam may be in flight."""
        projectiles, cannon = make_projectiles()
        projectiles.fire(cannon)
        projectiles.advance_beam()
        cannon.x += 40

        assert not projectiles.fire(cannon)
        assert (projectiles.beam.x, projectiles.beam.y) == (57, 240)

    def test_beam_deactivates_after_leaving_the_top(self) -> None:
        projectiles, cannon = make_projectiles()
        projectiles.fire(cannon)

        for _ in range(25):
            projectiles.advance_beam()
        assert projectiles.beam_active
        assert projectiles.beam.y == 0

        projectiles.advance_beam()
        assert not projectiles.beam_active
        assert projectiles.beam.y == 300

    def test_can_fire_again_after_deactivation(self) -> None:
        projectiles, cannon = make_projectiles()
        projectiles.fire(cannon)
        projectiles.deactivate_beam()

        assert projectiles.fire(cannon)


class TestBombs:
    """Tests for bomb creation, movement and pruning."""

    def test_bomb_leaves_middle_of_enemy(self) -> None:
        enemy = create_enemy(100, 30, SpriteKind.ENEMY_TOP, 30)
        bomb = create_bomb(enemy)

        assert (bomb.x, bomb.y) == (107, 30)
        assert bomb.kind is SpriteKind.BOMB
        assert bomb.points == 0

    def test_bombs_fall(self) -> None:
        projectiles, _ = make_projectiles()
        enemy = create_enemy(100, 30, SpriteKind.ENEMY_TOP, 30)
        bomb = projectiles.drop_bomb(enemy)

        projectiles.advance_bombs()
        projectiles.advance_bombs()

        assert bomb.y == 50

    def test_prune_only_removes_bombs_below_the_frame(self) -> None:
        projectiles, _ = make_projectiles()
        enemy = create_enemy(100, 30, SpriteKind.ENEMY_TOP, 30)
        visible = projectiles.drop_bomb(enemy)
        visible.y = 299
        gone = projectiles.drop_bomb(enemy)
        gone.y = 300

        assert projectiles.prune_bombs() == 1
        assert projectiles.bombs == [visible]

    def test_bomb_size_is_fixed(self) -> None:
        projectiles, _ = make_projectiles()
        bomb = projectiles.drop_bomb(create_enemy(100, 30, SpriteKind.ENEMY_TOP, 30))
        for _ in range(5):
            projectiles.advance_bombs()
        assert (bomb.width, bomb.height) == (10, 9)
