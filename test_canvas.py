#!/usr/bin/env python3
"""
Tests for canvas sizing and allocation.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent))

import pytest
from PIL import Image

from spritesheet_core.canvas import CANVAS_MARGIN, build_canvas, canvas_size, create_canvas
from spritesheet_core.errors import EmptyInputError
from spritesheet_core.image_descriptor import DecodedImage, ImageDescriptor, Point


def make_record(fit, box):
    descriptor = ImageDescriptor(
        path=Path('unused.png'), fit=Point(*fit), width=box[0], height=box[1],
        origin_width=box[0], origin_height=box[1]
    )
    return DecodedImage(descriptor, Image.new('RGBA', box))


def test_canvas_size_maximises_each_axis_independently():
    records = [
        make_record(fit=(100, 0), box=(50, 10)),   # rightmost
        make_record(fit=(0, 200), box=(10, 30)),   # bottommost
        make_record(fit=(20, 20), box=(20, 20)),
    ]
    assert canvas_size(records) == (150, 230)


def test_build_canvas_adds_margin():
    records = [make_record(fit=(0, 0), box=(10, 10)), make_record(fit=(10, 0), box=(10, 10))]
    canvas = build_canvas(records)
    assert canvas.size == (20 + CANVAS_MARGIN, 10 + CANVAS_MARGIN)
    assert canvas.mode == 'RGBA'


def test_create_canvas_is_fully_transparent():
    canvas = create_canvas(7, 3)
    assert canvas.size == (17, 13)
    assert set(canvas.getdata()) == {(0, 0, 0, 0)}


def test_empty_input_raises():
    with pytest.raises(EmptyInputError):
        canvas_size([])
    with pytest.raises(EmptyInputError):
        build_canvas([])


def test_negative_fit_is_rejected():
    with pytest.raises(ValueError):
        ImageDescriptor(path='a.png', fit=Point(-1, 0))


def test_negative_dimensions_are_rejected():
    with pytest.raises(ValueError):
        ImageDescriptor(path='a.png', width=-50, height=4)
    with pytest.raises(ValueError):
        ImageDescriptor(path='a.png', origin_width=-1)
