import pygame
import pytest

from pongfire.text import Alignment, Text
from pongfire.vec import Vec


class FakeFont:
    def render(self, text, antialias, color):
        image = pygame.Surface((len(text) * 10, 20))
        image.fill(color)
        return image


@pytest.fixture
def font():
    return FakeFont()


def test_left_alignment_starts_at_position(font):
    label = Text(font, "hello", Alignment.LEFT, Vec(100, 50))
    assert label.rect.left == 100
    assert label.rect.centery == 50


def test_right_alignment_ends_at_position(font):
    label = Text(font, "hello", Alignment.RIGHT, Vec(100, 50))
    assert label.rect.right == 100
    assert label.rect.centery == 50


def test_center_alignment_is_centred_on_position(font):
    label = Text(font, "hello", Alignment.CENTER, Vec(100, 50))
    assert label.rect.centerx == 100
    assert label.rect.width == font.render("hello", False, (0, 0, 0)).get_width()


def test_update_changes_text_and_keeps_anchor(font):
    label = Text(font, "hello", Alignment.RIGHT, Vec(200, 60))
    label.update("hi")
    assert label.text == "hi"
    assert label.rect.right == 200
    assert label.rect.width == font.render("hi", False, (0, 0, 0)).get_width()


def test_set_color_changes_drawn_pixels_but_not_rect(font):
    label = Text(font, "abc", Alignment.LEFT, Vec(10, 30))
    before = label.rect.copy()
    label.set_color((0xAA, 0x44, 0x33, 0xFF))
    target = pygame.Surface((100, 100))
    label.draw(target)
    assert label.rect == before
    assert target.get_at(label.rect.topleft) == (0xAA, 0x44, 0x33, 0xFF)


def test_update_restores_white(font):
    label = Text(font, "abc", Alignment.LEFT, Vec(10, 30))
    label.set_color((0xAA, 0x44, 0x33, 0xFF))
    label.update("abcd")
    target = pygame.Surface((100, 100))
    label.draw(target)
    assert target.get_at(label.rect.topleft) == (0xFF, 0xFF, 0xFF, 0xFF)