"""Tests for the bounding box collision resolver."""

import pytest

from sprite_invaders.game.collision import collides
from sprite_invaders.game.sprite import Sprite, SpriteKind


def sprite(kind: SpriteKind, x: int, y: int) -> Sprite:
    return Sprite(kind, x, y)


class TestCollides:
    """Tests for collides()."""

    def test_overlapping_sprites_collide(self) -> None:
        """Rectangles sharing an area collide."""
        cannon = sprite(SpriteKind.CANNON, 50, 250)
        bomb = sprite(SpriteKind.BOMB, 55, 245)
        assert collides(cannon, bomb)

    def test_far_apart_sprites_do_not_collide(self) -> None:
        cannon = sprite(SpriteKind.CANNON, 50, 250)
        bomb = sprite(SpriteKind.BOMB, 200, 30)
        assert not collides(cannon, bomb)

    def test_edge_touching_horizontally_is_not_a_collision(self) -> None:
        """Cannon is 18 wide, so a bomb at x=18 only touches its right edge."""
        cannon = sprite(SpriteKind.CANNON, 0, 0)
        bomb = sprite(SpriteKind.BOMB, 18, 0)
        assert not collides(cannon, bomb)
        assert not collides(bomb, cannon)

    def test_edge_touching_vertically_is_not_a_collision(self) -> None:
        """Cannon is 12 tall, so a bomb at y=12 only touches its bottom edge."""
        cannon = sprite(SpriteKind.CANNON, 0, 0)
        bomb = sprite(SpriteKind.BOMB, 0, 12)
        assert not collides(cannon, bomb)

    def test_one_pixel_overlap_collides(self) -> None:
        cannon = sprite(SpriteKind.CANNON, 0, 0)
        bomb = sprite(SpriteKind.BOMB, 17, 11)
        assert collides(cannon, bomb)

    def test_each_sprite_uses_its_own_size(self) -> None:
        """A small beam overlapping only the far corner of a large enemy still collides."""
        enemy = sprite(SpriteKind.ENEMY_TOP, 0, 0)  # 20x14
        beam = sprite(SpriteKind.BEAM, 19, 13)  # 2x5
        assert collides(enemy, beam)
        assert collides(beam, enemy)

    @pytest.mark.parametrize(
        "kind_a, pos_a, kind_b, pos_b",
        [
            (SpriteKind.BEAM, (5, 5), SpriteKind.ENEMY_MIDDLE, (0, 0)),
            (SpriteKind.BEAM, (20, 0), SpriteKind.ENEMY_MIDDLE, (0, 0)),
            (SpriteKind.BOMB, (-5, -5), SpriteKind.CANNON, (0, 0)),
            (SpriteKind.ENEMY_BOTTOM, (10, 10), SpriteKind.ENEMY_TOP, (25, 20)),
            (SpriteKind.CANNON, (100, 250), SpriteKind.BOMB, (107, 250)),
        ],
    )
    def test_collision_is_symmetric(self, kind_a, pos_a, kind_b, pos_b) -> None:
        a = sprite(kind_a, *pos_a)
        b = sprite(kind_b, *pos_b)
        assert collides(a, b) == collides(b, a)
